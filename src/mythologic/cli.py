"""Command-line interface for Mythologic."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from mythologic import __version__

console = Console()


def _configure_logging(verbose: bool) -> None:
    from mythologic.config import get_settings

    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_source(source: str):
    """Resolve SOURCE to an ontology: an example dataset name or a JSON file."""
    from mythologic.errors import SerializationError
    from mythologic.examples import ALL_ONTOLOGIES, create_example_ontology
    from mythologic.serialization import load_ontology

    if source.lower() in ALL_ONTOLOGIES:
        return create_example_ontology(source)

    path = Path(source)
    if not path.exists():
        console.print(
            f"[red]Unknown source '{escape(source)}'[/red] "
            f"[dim](datasets: {', '.join(ALL_ONTOLOGIES)}, or a saved .json file)[/dim]"
        )
        raise SystemExit(1)

    try:
        return load_ontology(path)
    except SerializationError as e:
        console.print(f"[red]Could not load {escape(str(path))}:[/red] {escape(str(e))}")
        raise SystemExit(1) from e


def _source_stem(source: str) -> str:
    return Path(source).stem.lower().replace(" ", "_")


def _print_suggestions(engine, text: str) -> None:
    suggestions = engine.suggest_names(text)
    if suggestions:
        console.print(f"[dim]Did you mean: {', '.join(suggestions)}?[/dim]")


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Mythologic - explore a knowledge graph of world mythologies."""
    _configure_logging(verbose)


@main.command()
def datasets() -> None:
    """List the bundled example datasets."""
    from mythologic.examples import ALL_ONTOLOGIES, EXAMPLE_ONTOLOGIES

    table = Table(title="Example Datasets")
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Entities", style="green", justify="right")

    for name, factory in ALL_ONTOLOGIES.items():
        kind = "culture" if name in EXAMPLE_ONTOLOGIES else "collection"
        table.add_row(name, kind, f"{factory().entity_count():,}")

    console.print(table)


@main.command()
@click.argument("source")
def stats(source: str) -> None:
    """Show entity counts per type for SOURCE."""
    from mythologic.graph import entity_type_counts

    ontology = _load_source(source)

    table = Table(title=f"Entity Statistics: {source}")
    table.add_column("Entity Type", style="cyan")
    table.add_column("Count", style="green", justify="right")

    for entity_type, count in entity_type_counts(ontology).items():
        table.add_row(entity_type, f"{count:,}")
    table.add_row("[bold]Total[/bold]", f"[bold]{ontology.entity_count():,}[/bold]")

    console.print(table)

    dangling = ontology.dangling_references()
    if dangling:
        console.print(f"[yellow]{len(dangling)} relationship endpoint(s) are not stored[/yellow]")


@main.command()
@click.argument("source")
@click.option("--type", "-t", "entity_type", help="Exact entity type, e.g. Deity")
@click.option("--name", "-n", help="Case-insensitive name substring")
@click.option("--culture", "-c", help="Exact culture name, e.g. Greek")
@click.option("--attr", "-a", "attrs", multiple=True, help="Metadata attribute KEY or KEY=VALUE")
def query(
    source: str,
    entity_type: str | None,
    name: str | None,
    culture: str | None,
    attrs: tuple[str, ...],
) -> None:
    """Find entities in SOURCE matching every given filter."""
    from mythologic.query import QueryEngine, QueryFilter

    ontology = _load_source(source)
    engine = QueryEngine(ontology)

    filters = []
    if entity_type:
        filters.append(QueryFilter.entity_type(entity_type))
    if name:
        filters.append(QueryFilter.name_contains(name))
    if culture:
        filters.append(QueryFilter.culture(culture))
    for attr in attrs:
        key, sep, value = attr.partition("=")
        if sep:
            filters.append(QueryFilter.attribute_equals(key, value))
        else:
            filters.append(QueryFilter.has_attribute(key))

    results = engine.query(filters)
    if results.is_empty():
        console.print("[yellow]No matching entities[/yellow]")
        if name:
            _print_suggestions(engine, name)
        return

    results.sort_by_name()
    table = Table(title=f"{results.count()} result(s)")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("ID", style="dim")
    for result in results:
        table.add_row(result.name, result.entity_type, str(result.id))

    console.print(table)


@main.command()
@click.argument("source")
@click.argument("name")
def related(source: str, name: str) -> None:
    """Show the relationships and neighbors of the entity called NAME."""
    from mythologic.models import Relationship
    from mythologic.query import QueryEngine

    ontology = _load_source(source)
    engine = QueryEngine(ontology)

    entity = ontology.lookup_name(name)
    if entity is None:
        console.print(f"[red]No entity named '{escape(name)}'[/red]")
        _print_suggestions(engine, name)
        raise SystemExit(1)

    console.print(f"[bold]{entity.name}[/bold] [dim]({entity.entity_type})[/dim]")
    if entity.description:
        console.print(f"  {entity.description}\n")

    relationships = engine.find_related(entity.id)
    if relationships.is_empty():
        console.print("[dim]No registered relationships[/dim]")
    else:
        table = Table(title="Relationships")
        table.add_column("Relationship", style="cyan")
        table.add_column("Type", style="magenta")
        table.add_column("Other end", style="green")
        for result in relationships:
            rel = ontology.get_entity(result.id)
            other_id = rel.other_end(entity.id) if isinstance(rel, Relationship) else None
            other = ontology.get_entity(other_id) if other_id is not None else None
            table.add_row(result.name, result.entity_type, other.name if other else "-")
        console.print(table)

    neighbors = engine.find_neighbors(entity.id)
    if not neighbors.is_empty():
        console.print(f"\n[bold]Neighbors:[/bold] {', '.join(neighbors.names())}")


@main.command()
@click.argument("source")
@click.argument("output", type=click.Path())
def export(source: str, output: str) -> None:
    """Write SOURCE to OUTPUT as JSON."""
    from mythologic.serialization import save_ontology

    ontology = _load_source(source)
    path = save_ontology(ontology, Path(output))
    console.print(f"[green]✓[/green] Exported {ontology.entity_count():,} entities to {path}")


@main.command()
@click.argument("source")
@click.argument("output", type=click.Path(), required=False)
def visualize(source: str, output: str | None) -> None:
    """Write an interactive HTML graph of SOURCE.

    Use ``all`` as SOURCE to write one file per example dataset into the
    OUTPUT directory.
    """
    from mythologic.config import get_settings
    from mythologic.examples import ALL_ONTOLOGIES
    from mythologic.graph import generate_html_visualization

    if source.lower() == "all":
        output_dir = Path(output) if output else get_settings().exports_dir
        for name, factory in ALL_ONTOLOGIES.items():
            path = generate_html_visualization(factory(), output_dir / f"{name}_graph.html")
            console.print(f"[green]✓[/green] {name}: {path}")
        return

    ontology = _load_source(source)
    path = Path(output) if output else get_settings().exports_dir / f"{_source_stem(source)}_graph.html"
    generate_html_visualization(ontology, path)

    console.print(f"\nVisualization saved to: {path.absolute()}")
    console.print("Open this file in your browser to explore the graph!")


if __name__ == "__main__":
    main()
