"""Update command: refresh the cached indexes."""

import click

from vega_population.cli.output import user_output
from vega_population.context import PopulationContext
from vega_population.error_boundary import cli_error_boundary


@click.command("update")
@click.option("--source", help="Custom source URL or path")
@click.pass_obj
@cli_error_boundary
def update_cmd(ctx: PopulationContext, source: str | None) -> None:
    """Update the local index cache."""
    client = ctx.create_client(source=source)

    user_output("Updating cache...")
    client.update_cache()
    user_output("✓ Cache updated")
