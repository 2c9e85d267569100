"""Population source: cached index access and manifest fetches."""

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from typing import TypeVar

from vega_population.exceptions import (
    CacheUpdateError,
    CacheWriteError,
    NotFoundError,
    ParseError,
    PopulationError,
)
from vega_population.feedback import Feedback, LoggingFeedback
from vega_population.io.cache import IndexCache, index_cache_key
from vega_population.io.manifest import (
    INDEX_FILENAME,
    MANIFEST_FILENAME,
    parse_item_index,
    parse_manifest,
    parse_profile_index,
)
from vega_population.models.index import ItemIndex, ProfileIndex
from vega_population.models.kind import ALL_KINDS, ItemKind
from vega_population.models.manifest import Manifest
from vega_population.models.results import ItemInfo
from vega_population.sources.fetcher import Fetcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


def manifest_path(kind: ItemKind, name: str) -> str:
    """Source-relative path of an item's manifest, e.g. "skills/foo/vega.yaml"."""
    return f"{kind.plural}/{name}/{MANIFEST_FILENAME}"


def installed_manifest_path(install_dir: Path, kind: ItemKind, name: str) -> Path:
    """Location of an installed item's manifest under the install directory."""
    return install_dir / kind.plural / name / MANIFEST_FILENAME


class PopulationSource:
    """Index and manifest access for one population repository.

    Indexes go through the cache; manifests are always fetched.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        cache: IndexCache,
        *,
        feedback: Feedback | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._cache = cache
        self._feedback = feedback if feedback is not None else LoggingFeedback()

    @property
    def base(self) -> str:
        return self._fetcher.base

    def get_item_index(
        self, kind: ItemKind, *, cancel: threading.Event | None = None
    ) -> ItemIndex:
        """Return the skills or personas index.

        Raises:
            FetchError: If the index is not cached and cannot be fetched
            ParseError: If the index is malformed
        """
        return self._load_index(
            kind, lambda content, origin: parse_item_index(content, kind, origin), cancel
        )

    def get_profile_index(self, *, cancel: threading.Event | None = None) -> ProfileIndex:
        """Return the profiles index.

        Raises:
            FetchError: If the index is not cached and cannot be fetched
            ParseError: If the index is malformed
        """
        return self._load_index(ItemKind.PROFILE, parse_profile_index, cancel)

    def refresh_index(self, kind: ItemKind, *, cancel: threading.Event | None = None) -> None:
        """Load the index for kind, populating the cache on a miss."""
        if kind == ItemKind.PROFILE:
            self.get_profile_index(cancel=cancel)
        else:
            self.get_item_index(kind, cancel=cancel)

    def get_manifest_raw(
        self, kind: ItemKind, name: str, *, cancel: threading.Event | None = None
    ) -> bytes:
        """Fetch the raw bytes of an item's vega.yaml (never cached)."""
        return self._fetcher.fetch(manifest_path(kind, name), cancel=cancel)

    def get_manifest(
        self, kind: ItemKind, name: str, *, cancel: threading.Event | None = None
    ) -> Manifest:
        """Fetch and parse an item's vega.yaml.

        The manifest's own kind and name are not checked against the request.

        Raises:
            FetchError: If the manifest cannot be fetched
            ParseError: If the manifest is malformed
        """
        content = self.get_manifest_raw(kind, name, cancel=cancel)
        return parse_manifest(content, self.base + manifest_path(kind, name))

    def info(
        self,
        kind: ItemKind,
        name: str,
        install_dir: Path,
        *,
        cancel: threading.Event | None = None,
    ) -> ItemInfo:
        """Describe an item from its index entry plus its install status.

        Personas additionally report recommended skills from their manifest.
        The install probe only checks that the manifest file exists.

        Raises:
            NotFoundError: If name is not in the index for kind
            FetchError: If the index (or a persona manifest) cannot be fetched
            ParseError: If fetched content is malformed
        """
        if kind == ItemKind.PROFILE:
            profiles = self.get_profile_index(cancel=cancel)
            if name not in profiles:
                raise NotFoundError(kind, name)
            profile = profiles[name]
            info = ItemInfo(
                kind=kind,
                name=name,
                version=profile.version,
                description=profile.description,
                author=profile.author,
                persona=profile.persona,
                skills=profile.skills,
            )
        else:
            entries = self.get_item_index(kind, cancel=cancel)
            if name not in entries:
                raise NotFoundError(kind, name)
            entry = entries[name]
            recommended: tuple[str, ...] = ()
            if kind == ItemKind.PERSONA:
                recommended = self.get_manifest(kind, name, cancel=cancel).recommended_skills
            info = ItemInfo(
                kind=kind,
                name=name,
                version=entry.version,
                description=entry.description,
                author=entry.author,
                tags=entry.tags,
                tools=entry.tools,
                recommended_skills=recommended,
            )

        installed = installed_manifest_path(install_dir, kind, name)
        if installed.exists():
            return replace(info, installed=True, installed_path=installed.parent)
        return info

    def update_cache(self, *, cancel: threading.Event | None = None) -> None:
        """Drop every cached index, then fetch all three again.

        A failure part-way through leaves the cache partially repopulated.

        Raises:
            CacheWriteError: If the cache directory cannot be removed
            CacheUpdateError: If any index cannot be fetched or parsed
        """
        self._cache.invalidate_all()
        for kind in ALL_KINDS:
            logger.debug("Refreshing %s index from %s", kind.plural, self.base)
            try:
                self.refresh_index(kind, cancel=cancel)
            except PopulationError as e:
                raise CacheUpdateError(kind, e) from e

    def _load_index(
        self,
        kind: ItemKind,
        parse: Callable[[bytes, str], T],
        cancel: threading.Event | None,
    ) -> T:
        key = index_cache_key(kind.plural)
        cached = self._cache.get(key)
        if cached is not None:
            try:
                return parse(cached, str(self._cache.directory / key))
            except ParseError as e:
                # A partially written entry is refetched like a miss
                logger.debug("Ignoring unparseable cache entry %s: %s", key, e)

        path = f"{kind.plural}/{INDEX_FILENAME}"
        content = self._fetcher.fetch(path, cancel=cancel)
        try:
            self._cache.set(key, content)
        except CacheWriteError as e:
            self._feedback.warning(f"failed to cache {key}: {e}")
        return parse(content, self.base + path)
