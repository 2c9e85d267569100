"""Search command."""

import click

from vega_population.cli.output import machine_output
from vega_population.context import PopulationContext
from vega_population.error_boundary import cli_error_boundary
from vega_population.models.kind import KIND_CHOICES, format_item_name, validate_item_kind
from vega_population.models.results import SearchOptions


def parse_tags(value: str | None) -> tuple[str, ...]:
    """Split a comma-separated tag list, dropping surrounding whitespace."""
    if not value:
        return ()
    return tuple(tag.strip() for tag in value.split(",") if tag.strip())


@click.command("search")
@click.argument("query", nargs=-1, required=True)
@click.option("--kind", type=click.Choice(KIND_CHOICES), help="Filter by kind")
@click.option("--tags", help="Filter by tags (comma-separated)")
@click.option("--limit", type=int, default=0, show_default=True, help="Maximum number of results")
@click.option("--source", help="Custom source URL or path")
@click.option("--no-cache", is_flag=True, help="Disable caching")
@click.pass_obj
@cli_error_boundary
def search_cmd(
    ctx: PopulationContext,
    query: tuple[str, ...],
    kind: str | None,
    tags: str | None,
    limit: int,
    source: str | None,
    no_cache: bool,
) -> None:
    """Search for skills, personas, and profiles."""
    text = " ".join(query)
    client = ctx.create_client(source=source, no_cache=no_cache)
    options = SearchOptions(
        kind=validate_item_kind(kind) if kind is not None else None,
        tags=parse_tags(tags),
        limit=limit,
    )

    results = client.search(text, options)
    if not results:
        machine_output(f"No results found for {text!r}")
        return

    machine_output(f"Found {len(results)} result(s) for {text!r}:\n")
    for result in results:
        name = format_item_name(result.kind, result.name)
        machine_output(f"  {name:<30}  {result.description}")
        if result.tags:
            machine_output(f"  {'':<30}  tags: {', '.join(result.tags)}")
        machine_output()
