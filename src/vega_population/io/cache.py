"""Time-bounded local cache for raw index bytes."""

import logging
import shutil
from pathlib import Path

from vega_population.exceptions import CacheWriteError
from vega_population.integrations.time import RealTime, Time

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL_SECONDS = 60 * 60


def index_cache_key(plural: str) -> str:
    """Cache file name for the index of a kind, e.g. "skills-index.yaml"."""
    return f"{plural}-index.yaml"


class IndexCache:
    """Directory of cached files that expire after a fixed time-to-live.

    Reads never raise: a missing, expired or unreadable entry is a miss and
    the caller fetches from the source instead. A disabled cache always
    misses and ignores writes, so call sites need not change to bypass it.
    The directory is assumed to have a single writer.
    """

    def __init__(
        self,
        directory: Path,
        *,
        disabled: bool = False,
        ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        time: Time | None = None,
    ) -> None:
        self._dir = directory
        self._disabled = disabled
        self._ttl_seconds = ttl_seconds
        self._time = time if time is not None else RealTime()

    @property
    def directory(self) -> Path:
        return self._dir

    @property
    def disabled(self) -> bool:
        return self._disabled

    def get(self, name: str) -> bytes | None:
        """Return cached bytes, or None on a miss.

        Args:
            name: Cache entry name (a file name inside the cache directory)

        Returns:
            Content of the entry if it exists and is younger than the TTL
        """
        if self._disabled:
            return None

        path = self._dir / name
        try:
            modified = path.stat().st_mtime
        except OSError:
            logger.debug("Cache miss for %s: not present", name)
            return None

        if self._time.now() - modified > self._ttl_seconds:
            logger.debug("Cache miss for %s: expired", name)
            return None

        try:
            content = path.read_bytes()
        except OSError as e:
            logger.debug("Cache miss for %s: unreadable (%s)", name, e)
            return None

        logger.debug("Cache hit for %s", name)
        return content

    def set(self, name: str, content: bytes) -> None:
        """Store bytes under name, replacing any previous value.

        Raises:
            CacheWriteError: If the directory or file cannot be written
        """
        if self._disabled:
            return

        path = self._dir / name
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            raise CacheWriteError(path, str(e)) from e

    def invalidate(self, name: str) -> None:
        """Remove one entry. A missing entry is not an error.

        Raises:
            CacheWriteError: If the entry exists but cannot be removed
        """
        path = self._dir / name
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise CacheWriteError(path, str(e)) from e

    def invalidate_all(self) -> None:
        """Remove the whole cache directory. A missing directory is not an error.

        Raises:
            CacheWriteError: If the directory exists but cannot be removed
        """
        if not self._dir.exists():
            return
        try:
            shutil.rmtree(self._dir)
        except OSError as e:
            raise CacheWriteError(self._dir, str(e)) from e
