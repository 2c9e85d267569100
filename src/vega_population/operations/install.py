"""Install items from a source into the install directory.

Profiles install their persona and skills first. Each dependency is
installed with no_deps forced on, so recursion is exactly one level deep.
A dependency that is already installed is tolerated when force is off, which
makes re-installing a profile idempotent. Dependencies installed before a
later failure are not rolled back.
"""

import logging
import threading
from dataclasses import replace
from pathlib import Path

from vega_population.exceptions import (
    AlreadyInstalledError,
    DependencyInstallError,
    NotFoundError,
    PopulationError,
)
from vega_population.feedback import Feedback, LoggingFeedback
from vega_population.io.manifest import parse_manifest
from vega_population.models.kind import ItemKind
from vega_population.models.results import InstallOptions, InstallResult
from vega_population.sources.source import (
    PopulationSource,
    installed_manifest_path,
    manifest_path,
)

logger = logging.getLogger(__name__)


def install_item(
    source: PopulationSource,
    kind: ItemKind,
    name: str,
    install_dir: Path,
    options: InstallOptions,
    *,
    feedback: Feedback | None = None,
    cancel: threading.Event | None = None,
) -> InstallResult:
    """Install one item, and for profiles its dependencies.

    Args:
        source: Source to fetch manifests and indexes from
        kind: Kind of the item
        name: Bare item name (no prefix)
        install_dir: Root of the installation
        options: force / no_deps / dry_run
        feedback: Receives progress messages (defaults to logging)
        cancel: Event that aborts in-flight remote fetches

    Returns:
        InstallResult describing the item and any dependencies

    Raises:
        AlreadyInstalledError: If the item exists and force is off
        DependencyInstallError: If a profile dependency fails
        NotFoundError: If a profile is missing from the profiles index
        FetchError: If the manifest cannot be fetched
        ParseError: If the manifest is malformed
        OSError: If the install directory cannot be written
    """
    resolved_feedback = feedback if feedback is not None else LoggingFeedback()

    destination = installed_manifest_path(install_dir, kind, name)
    if destination.exists() and not options.force:
        raise AlreadyInstalledError(kind, name, destination.parent)

    if options.dry_run:
        resolved_feedback.info(f"Would install {kind} {name!r} to {destination.parent}")

    dependencies: tuple[InstallResult, ...] = ()
    if kind == ItemKind.PROFILE and not options.no_deps:
        dependencies = _install_profile_dependencies(
            source, name, install_dir, options, resolved_feedback, cancel
        )

    content = source.get_manifest_raw(kind, name, cancel=cancel)
    parse_manifest(content, source.base + manifest_path(kind, name))

    result = InstallResult(
        kind=kind,
        name=name,
        path=destination.parent,
        dry_run=options.dry_run,
        dependencies=dependencies,
    )
    if options.dry_run:
        return result

    logger.debug("Writing %s", destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(content)
    return result


def _install_profile_dependencies(
    source: PopulationSource,
    profile_name: str,
    install_dir: Path,
    options: InstallOptions,
    feedback: Feedback,
    cancel: threading.Event | None,
) -> tuple[InstallResult, ...]:
    profiles = source.get_profile_index(cancel=cancel)
    if profile_name not in profiles:
        raise NotFoundError(ItemKind.PROFILE, profile_name)
    profile = profiles[profile_name]

    planned: list[tuple[ItemKind, str]] = []
    if profile.persona:
        planned.append((ItemKind.PERSONA, profile.persona))
    planned.extend((ItemKind.SKILL, skill) for skill in profile.skills)

    dependency_options = replace(options, no_deps=True)
    results: list[InstallResult] = []
    for dep_kind, dep_name in planned:
        if options.dry_run:
            feedback.info(
                f"Would install {dep_kind} {dep_name!r} (dependency of profile {profile_name!r})"
            )
        else:
            feedback.info(f"Installing {dep_kind} {dep_name!r}...")

        try:
            results.append(
                install_item(
                    source,
                    dep_kind,
                    dep_name,
                    install_dir,
                    dependency_options,
                    feedback=feedback,
                    cancel=cancel,
                )
            )
        except AlreadyInstalledError as e:
            if not options.dry_run:
                feedback.info(f"  {dep_kind.value.capitalize()} {dep_name!r} already installed")
            results.append(
                InstallResult(
                    kind=dep_kind,
                    name=dep_name,
                    path=e.path,
                    dry_run=options.dry_run,
                    already_installed=True,
                )
            )
        except (PopulationError, OSError) as e:
            raise DependencyInstallError(profile_name, dep_kind, dep_name, e) from e

    return tuple(results)
