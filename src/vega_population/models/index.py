"""Index models.

An index is a per-kind mapping from item name to summary metadata, fetched
and cached as a single `<plural>/index.yaml` file.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IndexEntry:
    """Skill or persona entry in an index."""

    version: str
    description: str
    author: str
    tags: tuple[str, ...] = ()
    tools: tuple[str, ...] = ()  # Skills only


@dataclass(frozen=True)
class ProfileIndexEntry:
    """Profile entry in the profiles index. Profiles carry no tags."""

    version: str
    description: str
    author: str
    persona: str = ""
    skills: tuple[str, ...] = ()


ItemIndex = dict[str, IndexEntry]
ProfileIndex = dict[str, ProfileIndexEntry]
