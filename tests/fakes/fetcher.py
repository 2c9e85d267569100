"""In-memory Fetcher implementation for testing."""

import threading

from vega_population.exceptions import FetchError, FetchErrorKind
from vega_population.sources.fetcher import Fetcher


class FakeFetcher(Fetcher):
    """Serves files from a dict and records every path requested.

    All state is provided via constructor using keyword arguments.
    """

    def __init__(
        self,
        *,
        files: dict[str, bytes] | None = None,
        base: str = "memory://population/",
    ) -> None:
        """Create FakeFetcher with pre-configured content.

        Args:
            files: Mapping of source-relative path -> content. Missing paths
                fail like an HTTP 404.
            base: Base location reported to callers
        """
        self._files = files or {}
        self._base = base
        self._fetched: list[str] = []

    @property
    def base(self) -> str:
        return self._base

    @property
    def fetched(self) -> list[str]:
        """Paths requested so far, in order (for test assertions)."""
        return self._fetched

    def fetch(self, path: str, *, cancel: threading.Event | None = None) -> bytes:
        self._fetched.append(path)
        if path not in self._files:
            raise FetchError(
                FetchErrorKind.REMOTE_STATUS, self._base + path, "status 404", status_code=404
            )
        return self._files[path]
