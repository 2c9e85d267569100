import logging

import click

from vega_population.cli.commands.export import export_cmd
from vega_population.cli.commands.info import info_cmd
from vega_population.cli.commands.install import install_cmd
from vega_population.cli.commands.list_cmd import list_cmd
from vega_population.cli.commands.search import search_cmd
from vega_population.cli.commands.update import update_cmd
from vega_population.context import create_context
from vega_population.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Show debug logging on stderr")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Manage Vega skills, personas (@name), and profiles (+name).

    \b
    Examples:
      vega-population search kubernetes
      vega-population install kubernetes-ops
      vega-population install @incident-commander
      vega-population install +platform-engineer
      vega-population export @cmo
      vega-population list
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)


cli.add_command(export_cmd)
cli.add_command(info_cmd)
cli.add_command(install_cmd)
cli.add_command(list_cmd)
cli.add_command(list_cmd, name="ls")
cli.add_command(search_cmd)
cli.add_command(update_cmd)


def main() -> None:
    """CLI entry point used by the `vega-population` console script."""
    cli()
