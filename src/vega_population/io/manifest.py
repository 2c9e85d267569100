"""Index and manifest YAML parsing."""

from pathlib import Path
from typing import Any

import yaml

from vega_population.exceptions import ParseError
from vega_population.models.index import IndexEntry, ItemIndex, ProfileIndex, ProfileIndexEntry
from vega_population.models.kind import ItemKind
from vega_population.models.manifest import Manifest

MANIFEST_FILENAME = "vega.yaml"
INDEX_FILENAME = "index.yaml"


def parse_item_index(content: bytes, kind: ItemKind, origin: str) -> ItemIndex:
    """Parse a skills or personas index.

    The file is a mapping with a single top-level key (the kind's plural)
    whose value maps item names to entries.

    Args:
        content: Raw index bytes
        kind: ItemKind.SKILL or ItemKind.PERSONA
        origin: Where the bytes came from (for error messages)

    Raises:
        ParseError: If the YAML is invalid or has the wrong shape
        ValueError: If kind is ItemKind.PROFILE
    """
    if kind == ItemKind.PROFILE:
        raise ValueError("Profile indexes must be parsed with parse_profile_index")

    what = f"{kind.plural} index"
    items = _load_index_items(content, kind, what, origin)

    index: ItemIndex = {}
    for name, raw in items.items():
        fields = _as_mapping(raw, what, origin, f"entry {name!r}")
        index[str(name)] = IndexEntry(
            version=_as_str(fields.get("version"), what, origin, "version"),
            description=_as_str(fields.get("description"), what, origin, "description"),
            author=_as_str(fields.get("author"), what, origin, "author"),
            tags=_as_str_tuple(fields.get("tags"), what, origin, "tags"),
            tools=_as_str_tuple(fields.get("tools"), what, origin, "tools"),
        )
    return index


def parse_profile_index(content: bytes, origin: str) -> ProfileIndex:
    """Parse the profiles index.

    Raises:
        ParseError: If the YAML is invalid or has the wrong shape
    """
    what = "profiles index"
    items = _load_index_items(content, ItemKind.PROFILE, what, origin)

    index: ProfileIndex = {}
    for name, raw in items.items():
        fields = _as_mapping(raw, what, origin, f"entry {name!r}")
        index[str(name)] = ProfileIndexEntry(
            version=_as_str(fields.get("version"), what, origin, "version"),
            description=_as_str(fields.get("description"), what, origin, "description"),
            author=_as_str(fields.get("author"), what, origin, "author"),
            persona=_as_str(fields.get("persona"), what, origin, "persona"),
            skills=_as_str_tuple(fields.get("skills"), what, origin, "skills"),
        )
    return index


def parse_manifest(content: bytes, origin: str) -> Manifest:
    """Parse a vega.yaml manifest.

    Raises:
        ParseError: If the YAML is invalid or has the wrong shape
    """
    what = "manifest"
    data = _as_mapping(_load_yaml(content, what, origin), what, origin, "document")
    return Manifest(
        kind=_as_str(data.get("kind"), what, origin, "kind"),
        name=_as_str(data.get("name"), what, origin, "name"),
        version=_as_str(data.get("version"), what, origin, "version"),
        description=_as_str(data.get("description"), what, origin, "description"),
        author=_as_str(data.get("author"), what, origin, "author"),
        tags=_as_str_tuple(data.get("tags"), what, origin, "tags"),
        persona=_as_str(data.get("persona"), what, origin, "persona"),
        skills=_as_str_tuple(data.get("skills"), what, origin, "skills"),
        recommended_skills=_as_str_tuple(
            data.get("recommended_skills"), what, origin, "recommended_skills"
        ),
        system_prompt=_as_str(data.get("system_prompt"), what, origin, "system_prompt"),
    )


def load_manifest(manifest_path: Path) -> Manifest:
    """Load an installed vega.yaml from disk.

    Raises:
        OSError: If the file cannot be read
        ParseError: If the content is malformed
    """
    return parse_manifest(manifest_path.read_bytes(), str(manifest_path))


def _load_yaml(content: bytes, what: str, origin: str) -> Any:
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ParseError(what, origin, str(e)) from e


def _load_index_items(content: bytes, kind: ItemKind, what: str, origin: str) -> dict[Any, Any]:
    data = _as_mapping(_load_yaml(content, what, origin), what, origin, "document")
    return _as_mapping(data.get(kind.plural), what, origin, f"{kind.plural!r} section")


def _as_mapping(value: Any, what: str, origin: str, field: str) -> dict[Any, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ParseError(what, origin, f"{field} must be a mapping, got {type(value).__name__}")
    return value


def _as_str(value: Any, what: str, origin: str, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ParseError(what, origin, f"{field!r} must be a scalar, got {type(value).__name__}")
    return str(value)


def _as_str_tuple(value: Any, what: str, origin: str, field: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ParseError(what, origin, f"{field!r} must be a list, got {type(value).__name__}")
    return tuple(_as_str(item, what, origin, field) for item in value)
