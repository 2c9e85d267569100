"""Info command."""

from pathlib import Path

import click

from vega_population.cli.output import machine_output
from vega_population.context import PopulationContext
from vega_population.error_boundary import cli_error_boundary
from vega_population.models.kind import format_item_name
from vega_population.models.results import ItemInfo


def format_info(info: ItemInfo) -> list[str]:
    """Render item details as aligned label/value lines."""
    lines = [
        f"Name:        {format_item_name(info.kind, info.name)}",
        f"Kind:        {info.kind}",
        f"Version:     {info.version}",
        f"Description: {info.description}",
        f"Author:      {info.author}",
    ]
    if info.tags:
        lines.append(f"Tags:        {', '.join(info.tags)}")
    if info.tools:
        lines.append(f"Tools:       {', '.join(info.tools)}")
    if info.persona:
        lines.append(f"Persona:     @{info.persona}")
    if info.skills:
        lines.append(f"Skills:      {', '.join(info.skills)}")
    if info.recommended_skills:
        lines.append(f"Recommended: {', '.join(info.recommended_skills)}")

    lines.append("")
    if info.installed:
        lines.append(f"Status:      Installed at {info.installed_path}")
    else:
        lines.append("Status:      Not installed")
    return lines


@click.command("info")
@click.argument("name")
@click.option("--source", help="Custom source URL or path")
@click.option(
    "--install-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Custom installation directory",
)
@click.pass_obj
@cli_error_boundary
def info_cmd(
    ctx: PopulationContext, name: str, source: str | None, install_dir: Path | None
) -> None:
    """Show detailed information about an item."""
    client = ctx.create_client(source=source, install_dir=install_dir)
    for line in format_info(client.info(name)):
        machine_output(line)
