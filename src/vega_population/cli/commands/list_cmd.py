"""List command for showing installed items."""

from pathlib import Path

import click

from vega_population.cli.output import machine_output
from vega_population.context import PopulationContext
from vega_population.error_boundary import cli_error_boundary
from vega_population.models.kind import (
    ALL_KINDS,
    KIND_CHOICES,
    format_item_name,
    validate_item_kind,
)


@click.command("list")
@click.option("--kind", type=click.Choice(KIND_CHOICES), help="Filter by kind")
@click.option(
    "--install-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Custom installation directory",
)
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: PopulationContext, kind: str | None, install_dir: Path | None) -> None:
    """List installed items."""
    client = ctx.create_client(install_dir=install_dir)
    items = client.list_installed(validate_item_kind(kind) if kind is not None else None)

    if not items:
        machine_output("No items installed")
        return

    for item_kind in ALL_KINDS:
        of_kind = [item for item in items if item.kind == item_kind]
        if not of_kind:
            continue

        machine_output(f"{item_kind.plural.capitalize()}:")
        for item in of_kind:
            machine_output(f"  {format_item_name(item.kind, item.name):<30}  v{item.version}")
        machine_output()
