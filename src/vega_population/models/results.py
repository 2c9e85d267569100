"""Option and result models for client operations."""

from dataclasses import dataclass
from pathlib import Path

from vega_population.models.kind import ItemKind


@dataclass(frozen=True)
class SearchOptions:
    """Search filters.

    Attributes:
        kind: Restrict to one kind (None searches all kinds)
        tags: Keep only entries carrying at least one of these tags
        limit: Maximum number of results (0 means no limit)
    """

    kind: ItemKind | None = None
    tags: tuple[str, ...] = ()
    limit: int = 0


@dataclass(frozen=True)
class SearchResult:
    """Single ranked search hit."""

    kind: ItemKind
    name: str
    version: str
    description: str
    tags: tuple[str, ...]
    score: float  # Relevance in [0, 1]


@dataclass(frozen=True)
class InstallOptions:
    """Installation behaviour.

    Attributes:
        force: Overwrite existing installations
        no_deps: Skip profile dependencies (persona and skills)
        dry_run: Resolve and fetch without touching the install directory
    """

    force: bool = False
    no_deps: bool = False
    dry_run: bool = False


@dataclass(frozen=True)
class InstallResult:
    """Outcome of installing one item and, for profiles, its dependencies."""

    kind: ItemKind
    name: str
    path: Path  # Directory holding the installed vega.yaml
    dry_run: bool = False
    already_installed: bool = False  # Tolerated dependency that was left untouched
    dependencies: tuple["InstallResult", ...] = ()


@dataclass(frozen=True)
class InstalledItem:
    """Item discovered in the install directory."""

    kind: ItemKind
    name: str
    version: str
    path: Path


@dataclass(frozen=True)
class ItemInfo:
    """Detailed information about an item in the source, plus install status."""

    kind: ItemKind
    name: str
    version: str
    description: str
    author: str
    tags: tuple[str, ...] = ()
    tools: tuple[str, ...] = ()
    # Profiles
    persona: str = ""
    skills: tuple[str, ...] = ()
    # Personas
    recommended_skills: tuple[str, ...] = ()
    installed: bool = False
    installed_path: Path | None = None
