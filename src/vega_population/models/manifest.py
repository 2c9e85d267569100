"""Manifest model for vega.yaml files."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Manifest:
    """Authoritative per-item record, fetched individually.

    `kind` is kept as the raw string from the file; it is not checked against
    the directory the manifest was fetched from.
    """

    kind: str
    name: str
    version: str
    description: str
    author: str
    tags: tuple[str, ...] = ()
    persona: str = ""  # Profiles
    skills: tuple[str, ...] = ()  # Profiles
    recommended_skills: tuple[str, ...] = ()  # Personas
    system_prompt: str = ""  # Personas
