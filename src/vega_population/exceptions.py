"""Exceptions raised by vega-population.

Every error carries the fields needed to diagnose it (kind, name, path or
URL) as attributes, so callers can branch on type and data instead of
inspecting message text.
"""

from enum import Enum
from pathlib import Path

from vega_population.models.kind import ItemKind, format_item_name


class PopulationError(Exception):
    """Base class for all vega-population errors."""


class FetchErrorKind(Enum):
    """Where a fetch failed."""

    LOCAL_READ = "local-read"
    REMOTE_TRANSPORT = "remote-transport"
    REMOTE_STATUS = "remote-status"
    REMOTE_BODY = "remote-body"


class FetchError(PopulationError):
    """Raised when content cannot be fetched from a source."""

    def __init__(
        self,
        kind: FetchErrorKind,
        location: str,
        detail: str,
        *,
        status_code: int | None = None,
    ) -> None:
        self.kind = kind
        self.location = location
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"Failed to fetch {location}: {detail}")


class FetchCancelledError(FetchError):
    """Raised when a remote fetch is aborted through its cancellation event."""

    def __init__(self, location: str) -> None:
        super().__init__(FetchErrorKind.REMOTE_TRANSPORT, location, "cancelled")


class ParseError(PopulationError):
    """Raised when index or manifest content is malformed."""

    def __init__(self, what: str, origin: str, detail: str) -> None:
        self.what = what
        self.origin = origin
        self.detail = detail
        super().__init__(f"Failed to parse {what} from {origin}: {detail}")


class NotFoundError(PopulationError):
    """Raised when a name is absent from the index of its kind."""

    def __init__(self, kind: ItemKind, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} {name!r} not found")


class AlreadyInstalledError(PopulationError):
    """Raised when the install destination exists and force is not set."""

    def __init__(self, kind: ItemKind, name: str, path: Path) -> None:
        self.kind = kind
        self.name = name
        self.path = path
        super().__init__(
            f"{kind} {format_item_name(kind, name)!r} is already installed at {path} "
            "(use --force to overwrite)"
        )


class CacheWriteError(PopulationError):
    """Raised when the cache directory cannot be written or cleared."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to update cache at {path}: {detail}")


class DependencyInstallError(PopulationError):
    """Raised when a profile dependency fails to install.

    The underlying error is chained as __cause__.
    """

    def __init__(self, profile: str, kind: ItemKind, name: str, cause: Exception) -> None:
        self.profile = profile
        self.kind = kind
        self.name = name
        self.cause = cause
        super().__init__(
            f"Installing {kind} {name!r} (dependency of profile {profile!r}) failed: {cause}"
        )


class CacheUpdateError(PopulationError):
    """Raised when refreshing the cached index for a kind fails.

    The underlying error is chained as __cause__.
    """

    def __init__(self, kind: ItemKind, cause: Exception) -> None:
        self.kind = kind
        self.cause = cause
        super().__init__(f"Fetching {kind.plural} index failed: {cause}")
