"""Export command: print a persona as a tron.vega.yaml agent entry."""

import click

from vega_population.cli.output import machine_output
from vega_population.context import PopulationContext
from vega_population.error_boundary import cli_error_boundary
from vega_population.export import (
    DEFAULT_BUDGET,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    extract_agent_name,
    render_agent_config,
    title_case,
)
from vega_population.models.kind import ItemKind, parse_item_name


@click.command("export")
@click.argument("name")
@click.option("--source", help="Custom source URL or path")
@click.option(
    "--name",
    "agent_name",
    help="Agent name to use (default: extracted from persona or capitalized ID)",
)
@click.option("--model", default=DEFAULT_MODEL, show_default=True, help="Model to use")
@click.option(
    "--temperature", type=float, default=DEFAULT_TEMPERATURE, show_default=True
)
@click.option("--budget", default=DEFAULT_BUDGET, show_default=True, help="Budget limit")
@click.pass_obj
@cli_error_boundary
def export_cmd(
    ctx: PopulationContext,
    name: str,
    source: str | None,
    agent_name: str | None,
    model: str,
    temperature: float,
    budget: str,
) -> None:
    """Export a persona (@name) as YAML for tron.vega.yaml."""
    kind, item_name = parse_item_name(name)
    if kind != ItemKind.PERSONA:
        raise ValueError("export only works with personas (use @name format)")

    client = ctx.create_client(source=source)
    manifest = client.get_manifest(name)

    resolved_name = agent_name
    if resolved_name is None:
        resolved_name = extract_agent_name(manifest.system_prompt) or title_case(item_name)

    rendered = render_agent_config(
        manifest,
        agent_name=resolved_name,
        model=model,
        temperature=temperature,
        budget=budget,
    )
    machine_output(rendered.rstrip("\n"))
