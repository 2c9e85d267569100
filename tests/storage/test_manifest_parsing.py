"""Tests for index and manifest parsing."""

from pathlib import Path

import pytest

from vega_population.exceptions import ParseError
from vega_population.io.manifest import (
    load_manifest,
    parse_item_index,
    parse_manifest,
    parse_profile_index,
)
from vega_population.models.kind import ItemKind
from tests.test_utils.population import (
    CMO_MANIFEST,
    PERSONAS_INDEX,
    PROFILES_INDEX,
    SKILLS_INDEX,
)


def test_parse_skills_index() -> None:
    index = parse_item_index(SKILLS_INDEX, ItemKind.SKILL, "skills/index.yaml")

    assert set(index) == {"kubernetes-ops", "docker-build", "incident-notes"}
    entry = index["kubernetes-ops"]
    assert entry.version == "1.0.0"
    assert entry.description == "Kubernetes cluster management"
    assert entry.author == "vega"
    assert entry.tags == ("k8s", "cluster")
    assert entry.tools == ("kubectl", "helm")
    assert index["docker-build"].tools == ()


def test_parse_personas_index() -> None:
    index = parse_item_index(PERSONAS_INDEX, ItemKind.PERSONA, "personas/index.yaml")

    assert index["cmo"].version == "2.0.0"
    assert index["incident-commander"].tags == ("incident", "leadership")


def test_parse_item_index_rejects_profile_kind() -> None:
    with pytest.raises(ValueError, match="parse_profile_index"):
        parse_item_index(PROFILES_INDEX, ItemKind.PROFILE, "profiles/index.yaml")


def test_parse_profile_index() -> None:
    index = parse_profile_index(PROFILES_INDEX, "profiles/index.yaml")

    profile = index["platform-engineer"]
    assert profile.persona == "incident-commander"
    assert profile.skills == ("kubernetes-ops", "docker-build")


def test_empty_index_is_empty_mapping() -> None:
    assert parse_item_index(b"", ItemKind.SKILL, "skills/index.yaml") == {}
    assert parse_item_index(b"skills:\n", ItemKind.SKILL, "skills/index.yaml") == {}
    assert parse_profile_index(b"other: {}\n", "profiles/index.yaml") == {}


def test_missing_fields_default_to_empty() -> None:
    index = parse_item_index(b"skills:\n  bare: {}\n", ItemKind.SKILL, "skills/index.yaml")

    entry = index["bare"]
    assert entry.version == ""
    assert entry.description == ""
    assert entry.tags == ()


def test_numeric_version_is_stringified() -> None:
    index = parse_item_index(
        b"skills:\n  numeric:\n    version: 2.5\n", ItemKind.SKILL, "skills/index.yaml"
    )

    assert index["numeric"].version == "2.5"


def test_invalid_yaml_raises_parse_error() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_item_index(b"skills: [unclosed\n", ItemKind.SKILL, "skills/index.yaml")

    assert exc_info.value.origin == "skills/index.yaml"
    assert exc_info.value.what == "skills index"


def test_wrong_shape_raises_parse_error() -> None:
    with pytest.raises(ParseError, match="must be a mapping"):
        parse_item_index(b"skills: [a, b]\n", ItemKind.SKILL, "skills/index.yaml")

    with pytest.raises(ParseError, match="must be a list"):
        parse_item_index(
            b"skills:\n  x:\n    tags: k8s\n", ItemKind.SKILL, "skills/index.yaml"
        )

    with pytest.raises(ParseError, match="must be a scalar"):
        parse_profile_index(
            b"profiles:\n  x:\n    persona: [a]\n", "profiles/index.yaml"
        )


def test_parse_manifest_reads_all_fields() -> None:
    manifest = parse_manifest(CMO_MANIFEST, "personas/cmo/vega.yaml")

    assert manifest.kind == "persona"
    assert manifest.name == "cmo"
    assert manifest.recommended_skills == ("market-research", "copywriting")
    assert manifest.system_prompt.startswith("You are Maya, the chief marketing officer.\n")
    assert manifest.skills == ()


def test_parse_manifest_rejects_non_mapping() -> None:
    with pytest.raises(ParseError, match="document must be a mapping"):
        parse_manifest(b"- just\n- a list\n", "vega.yaml")


def test_load_manifest_from_disk(tmp_path: Path) -> None:
    manifest_file = tmp_path / "vega.yaml"
    manifest_file.write_bytes(CMO_MANIFEST)

    assert load_manifest(manifest_file).name == "cmo"


def test_load_manifest_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_manifest(tmp_path / "vega.yaml")
