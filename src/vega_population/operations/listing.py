"""Discover installed items by scanning the install directory."""

import logging
from pathlib import Path

from vega_population.exceptions import ParseError
from vega_population.io.manifest import MANIFEST_FILENAME, load_manifest
from vega_population.models.kind import ALL_KINDS, ItemKind
from vega_population.models.results import InstalledItem

logger = logging.getLogger(__name__)


def list_installed(install_dir: Path, kind: ItemKind | None = None) -> list[InstalledItem]:
    """List installed items, grouped by kind and sorted by name.

    Directories without a readable, well-formed vega.yaml are skipped.

    Args:
        install_dir: Root of the installation
        kind: Only list this kind (None lists all kinds)

    Returns:
        Installed items in kind order (skills, personas, profiles)

    Raises:
        OSError: If a kind directory exists but cannot be listed
    """
    kinds = (kind,) if kind is not None else ALL_KINDS

    items: list[InstalledItem] = []
    for item_kind in kinds:
        kind_dir = install_dir / item_kind.plural
        if not kind_dir.exists():
            continue

        for item_dir in sorted(kind_dir.iterdir()):
            if not item_dir.is_dir():
                continue

            manifest_file = item_dir / MANIFEST_FILENAME
            if not manifest_file.exists():
                continue

            try:
                manifest = load_manifest(manifest_file)
            except (OSError, ParseError) as e:
                logger.debug("Skipping %s: %s", item_dir, e)
                continue

            items.append(
                InstalledItem(
                    kind=item_kind,
                    name=item_dir.name,
                    version=manifest.version,
                    path=item_dir,
                )
            )

    return items
