"""Byte-level fetching from a local directory or a remote HTTP endpoint."""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

import httpx

from vega_population.exceptions import FetchCancelledError, FetchError, FetchErrorKind

logger = logging.getLogger(__name__)

REMOTE_PREFIXES = ("http://", "https://")


def normalize_base(base: str) -> str:
    """Ensure a base location ends with a path separator."""
    if base.endswith("/"):
        return base
    return f"{base}/"


def is_remote(base: str) -> bool:
    """Check whether a base location names an HTTP(S) endpoint."""
    return base.startswith(REMOTE_PREFIXES)


class Fetcher(ABC):
    """Fetch files relative to a base location."""

    @property
    @abstractmethod
    def base(self) -> str:
        """Normalized base location, ending with "/"."""
        ...

    @abstractmethod
    def fetch(self, path: str, *, cancel: threading.Event | None = None) -> bytes:
        """Return the content of path relative to the base.

        Args:
            path: Relative path such as "skills/index.yaml"
            cancel: Event that aborts an in-flight remote fetch when set

        Raises:
            FetchError: If the content cannot be retrieved
        """
        ...


class LocalFetcher(Fetcher):
    """Read files from a directory on disk."""

    def __init__(self, base: str) -> None:
        self._base = normalize_base(base)
        self._root = Path(self._base)

    @property
    def base(self) -> str:
        return self._base

    def fetch(self, path: str, *, cancel: threading.Event | None = None) -> bytes:
        full_path = self._root / path
        logger.debug("Reading local file %s", full_path)
        try:
            return full_path.read_bytes()
        except OSError as e:
            raise FetchError(FetchErrorKind.LOCAL_READ, str(full_path), str(e)) from e


def default_http_client() -> httpx.Client:
    """Client used for remote fetches: follows redirects and never times out."""
    return httpx.Client(follow_redirects=True, timeout=None)


class HttpFetcher(Fetcher):
    """Fetch files with a single GET each.

    No retries and no timeout: a caller that needs to bound a fetch sets the
    cancellation event. The event is checked before the request is sent and
    again before the body is read. Each fetch opens its own client from
    client_factory and closes it before returning.
    """

    def __init__(
        self, base: str, client_factory: Callable[[], httpx.Client] | None = None
    ) -> None:
        self._base = normalize_base(base)
        self._client_factory = (
            client_factory if client_factory is not None else default_http_client
        )

    @property
    def base(self) -> str:
        return self._base

    def fetch(self, path: str, *, cancel: threading.Event | None = None) -> bytes:
        url = self._base + path
        if cancel is not None and cancel.is_set():
            raise FetchCancelledError(url)

        logger.debug("GET %s", url)
        try:
            with self._client_factory() as client, client.stream("GET", url) as response:
                if not response.is_success:
                    raise FetchError(
                        FetchErrorKind.REMOTE_STATUS,
                        url,
                        f"status {response.status_code}",
                        status_code=response.status_code,
                    )
                if cancel is not None and cancel.is_set():
                    raise FetchCancelledError(url)
                try:
                    return response.read()
                except httpx.HTTPError as e:
                    raise FetchError(FetchErrorKind.REMOTE_BODY, url, str(e)) from e
        except httpx.HTTPError as e:
            raise FetchError(FetchErrorKind.REMOTE_TRANSPORT, url, str(e)) from e


def create_fetcher(base: str) -> Fetcher:
    """Pick a fetcher for a base location.

    Locations starting with http:// or https:// are remote; anything else is
    a local filesystem root.
    """
    normalized = normalize_base(base)
    if is_remote(normalized):
        return HttpFetcher(normalized)
    return LocalFetcher(normalized)
