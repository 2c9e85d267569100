"""Client facade composing source, cache, search and installer.

Example:
    >>> from pathlib import Path
    >>> from vega_population.client import PopulationClient
    >>> from vega_population.models.config import default_config
    >>> client = PopulationClient(default_config(Path.home()))
    >>> for result in client.search("kubernetes"):
    ...     print(result.name, result.description)
"""

import threading
from collections.abc import Callable

from vega_population.feedback import Feedback, LoggingFeedback
from vega_population.integrations.time import RealTime, Time
from vega_population.io.cache import IndexCache
from vega_population.models.config import PopulationConfig
from vega_population.models.kind import ItemKind, parse_item_name
from vega_population.models.manifest import Manifest
from vega_population.models.results import (
    InstalledItem,
    InstallOptions,
    InstallResult,
    ItemInfo,
    SearchOptions,
    SearchResult,
)
from vega_population.operations.install import install_item
from vega_population.operations.listing import list_installed
from vega_population.operations.search import search
from vega_population.sources.fetcher import Fetcher, create_fetcher
from vega_population.sources.source import PopulationSource

FetcherFactory = Callable[[str], Fetcher]


class PopulationClient:
    """Entry point for library users.

    Each operation builds a fresh source from the held configuration. Names
    passed to install, info and get_manifest may carry a kind prefix
    (@persona, +profile); bare names are skills.
    """

    def __init__(
        self,
        config: PopulationConfig,
        *,
        feedback: Feedback | None = None,
        time: Time | None = None,
        fetcher_factory: FetcherFactory | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Source, cache and install locations
            feedback: Receives non-fatal diagnostics (defaults to logging)
            time: Clock used for cache expiry (defaults to the system clock)
            fetcher_factory: Builds a fetcher for a base location
                (defaults to create_fetcher)
        """
        self._config = config
        self._feedback = feedback if feedback is not None else LoggingFeedback()
        self._fetcher_factory = fetcher_factory if fetcher_factory is not None else create_fetcher
        self._cache = IndexCache(
            config.cache_dir,
            disabled=config.no_cache,
            time=time if time is not None else RealTime(),
        )

    @property
    def config(self) -> PopulationConfig:
        return self._config

    @property
    def cache(self) -> IndexCache:
        return self._cache

    def search(
        self,
        query: str,
        options: SearchOptions | None = None,
        *,
        cancel: threading.Event | None = None,
    ) -> list[SearchResult]:
        """Search all (or one) kinds and return ranked results."""
        resolved = options if options is not None else SearchOptions()
        return search(self._source(), query, resolved, cancel=cancel)

    def install(
        self,
        name: str,
        options: InstallOptions | None = None,
        *,
        cancel: threading.Event | None = None,
    ) -> InstallResult:
        """Install an item by (optionally prefixed) name."""
        kind, item_name = parse_item_name(name)
        resolved = options if options is not None else InstallOptions()
        return install_item(
            self._source(),
            kind,
            item_name,
            self._config.install_dir,
            resolved,
            feedback=self._feedback,
            cancel=cancel,
        )

    def list_installed(self, kind: ItemKind | None = None) -> list[InstalledItem]:
        """List installed items, optionally of one kind."""
        return list_installed(self._config.install_dir, kind)

    def info(self, name: str, *, cancel: threading.Event | None = None) -> ItemInfo:
        """Describe an item and whether it is installed."""
        kind, item_name = parse_item_name(name)
        return self._source().info(kind, item_name, self._config.install_dir, cancel=cancel)

    def get_manifest(self, name: str, *, cancel: threading.Event | None = None) -> Manifest:
        """Fetch and parse the manifest of an item."""
        kind, item_name = parse_item_name(name)
        return self._source().get_manifest(kind, item_name, cancel=cancel)

    def update_cache(self, *, cancel: threading.Event | None = None) -> None:
        """Drop and re-fetch every cached index."""
        self._source().update_cache(cancel=cancel)

    def _source(self) -> PopulationSource:
        return PopulationSource(
            self._fetcher_factory(self._config.source),
            self._cache,
            feedback=self._feedback,
        )
