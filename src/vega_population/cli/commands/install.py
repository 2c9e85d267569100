"""Install command."""

from pathlib import Path

import click

from vega_population.cli.output import user_output
from vega_population.context import PopulationContext
from vega_population.error_boundary import cli_error_boundary
from vega_population.models.kind import format_item_name, parse_item_name
from vega_population.models.results import InstallOptions


@click.command("install")
@click.argument("names", nargs=-1, required=True)
@click.option("--force", "-f", is_flag=True, help="Overwrite existing installation")
@click.option("--no-deps", is_flag=True, help="Skip profile dependencies")
@click.option("--dry-run", is_flag=True, help="Show what would be installed")
@click.option("--source", help="Custom source URL or path")
@click.option(
    "--install-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Custom installation directory",
)
@click.pass_obj
@cli_error_boundary
def install_cmd(
    ctx: PopulationContext,
    names: tuple[str, ...],
    force: bool,
    no_deps: bool,
    dry_run: bool,
    source: str | None,
    install_dir: Path | None,
) -> None:
    """Install skills, personas (@name), or profiles (+name).

    Profiles also install their persona and skills unless --no-deps is given.
    Stops at the first item that fails.
    """
    client = ctx.create_client(source=source, install_dir=install_dir)
    options = InstallOptions(force=force, no_deps=no_deps, dry_run=dry_run)

    for name in names:
        kind, item_name = parse_item_name(name)
        if not dry_run:
            user_output(f"Installing {kind} {item_name!r}...")

        result = client.install(name, options)

        if not dry_run:
            user_output(
                f"✓ Installed {format_item_name(kind, item_name)} to {result.path}"
            )
