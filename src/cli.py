"""CLI interface for the MCP catalog."""

import csv
import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.badges.badge import badge_for_record
from src.catalog.loader import CatalogLoader
from src.catalog.urls import get_badge_markdown_for_record, get_repository_url
from src.config import get_settings
from src.evaluators.composite import calculate_quality_score, score_with_context
from src.evaluators.registry import EvaluatorRegistry
from src.evaluators.stats_generator import build_eval_context
from src.models.model_search import SearchQuery, SortBy
from src.models.model_server import Category, ServerRecord
from src.search.service import search_records
from src.storage.cache.memory_cache import MemoryCache
from src.storage.permanent_storage.file_manager import FileManager

app = typer.Typer(
    name="mcp-catalog",
    help="MCP Catalog - Score, search and badge MCP servers",
)

console = Console()


class _State:
    data_dir: Path | None = None
    debug: bool = False


state = _State()


@app.callback()
def main_callback(
    data_dir: Path = typer.Option(None, "--data-dir", "-d", help="Catalog data directory"),
    debug: bool = typer.Option(False, "--debug", help="Verbose logging, no record cache"),
) -> None:
    """Configure data location and logging for every command."""
    settings = get_settings()
    state.data_dir = data_dir or settings.data_dir
    state.debug = debug or settings.debug
    logging.basicConfig(
        level=logging.DEBUG if state.debug else settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _storage() -> FileManager:
    return FileManager(state.data_dir or get_settings().data_dir)


def _loader() -> CatalogLoader:
    return CatalogLoader(_storage(), MemoryCache(), debug=state.debug)


def _get_score_color(score: int | None) -> str:
    """Get color for score display."""
    if score is None:
        return "dim"
    if score >= 80:
        return "green"
    elif score >= 50:
        return "yellow"
    else:
        return "red"


def _format_score(score: int | None) -> str:
    color = _get_score_color(score)
    text = str(score) if score is not None else "N/A"
    return f"[{color}]{text}[/{color}]"


def _truncate(text: str, max_len: int = 60) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def _parse_category(category: str | None) -> Category | None:
    if not category:
        return None
    try:
        return Category(category)
    except ValueError:
        console.print(f"[red]Error:[/red] Unknown category '{category}'. See 'categories'.")
        raise typer.Exit(1)


def _records_table(title: str, records: list[ServerRecord], offset: int = 0) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Category", style="blue")
    table.add_column("Language", style="dim")
    table.add_column("Score", justify="right")
    table.add_column("Stars", justify="right", style="dim")
    table.add_column("Description", style="dim")

    for rank, record in enumerate(records, offset + 1):
        table.add_row(
            str(rank),
            record.name,
            record.category.value if record.category else "",
            record.programming_language or "",
            _format_score(record.quality_score),
            str(record.stars),
            _truncate(record.description, 40),
        )
    return table


@app.command()
def search(
    query: str = typer.Argument("", help="Text matched against name, description, owner and repo"),
    category: str = typer.Option(None, "--category", "-c", help="Filter by category"),
    language: str = typer.Option(None, "--language", help="Filter by programming language"),
    sort_by: SortBy = typer.Option(SortBy.QUALITY, "--sort-by", "-s", help="Sort order"),
    limit: int = typer.Option(20, "--limit", "-l", help="Number of results (1-100)"),
    offset: int = typer.Option(0, "--offset", help="Results to skip"),
) -> None:
    """Search catalog servers."""
    try:
        search_query = SearchQuery(
            q=query,
            category=_parse_category(category),
            language=language,
            sort_by=sort_by,
            limit=limit,
            offset=offset,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    result = search_records(_loader().load_records(), search_query)
    if not result.servers:
        console.print(f"[yellow]No results found for '{query}'[/yellow]")
        return

    title = f"Search Results ({len(result.servers)} of {result.total_count})"
    console.print(_records_table(title, result.servers, offset=search_query.offset))
    if result.has_more:
        next_offset = search_query.offset + search_query.limit
        console.print(f"[dim]More results: --offset {next_offset}[/dim]")


@app.command()
def top(
    category: str = typer.Option(None, "--category", "-c", help="Filter by category"),
    limit: int = typer.Option(10, "--limit", "-l", help="Number of results"),
) -> None:
    """Show top-rated servers with their score breakdown."""
    selected = _parse_category(category)
    records = _loader().load_records()
    scored = [
        r for r in records
        if r.quality_score is not None and (selected is None or r.category == selected)
    ]

    if not scored:
        console.print("[yellow]No scored servers found.[/yellow]")
        return

    top_records = scored[:limit]
    title = f"Top {len(top_records)} Servers"
    if selected:
        title += f" in {selected.value}"

    table = Table(title=title)
    table.add_column("Rank", justify="right", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Score", justify="right")
    table.add_column("Proto", justify="right", style="dim")
    table.add_column("Comm", justify="right", style="dim")
    table.add_column("Deploy", justify="right", style="dim")
    table.add_column("Docs", justify="right", style="dim")
    table.add_column("Deps", justify="right", style="dim")
    table.add_column("Badge", justify="right", style="dim")

    context = build_eval_context(records)
    for rank, record in enumerate(top_records, 1):
        breakdown = score_with_context(record, context)
        table.add_row(
            str(rank),
            record.name,
            _format_score(record.quality_score),
            str(breakdown.mcp_protocol),
            str(breakdown.github_metrics),
            str(breakdown.deployment_maturity),
            str(breakdown.documentation),
            str(breakdown.dependencies),
            str(breakdown.badge_usage),
        )

    console.print(table)


@app.command()
def show(name: str = typer.Argument(..., help="Server identity, e.g. acme__widget")) -> None:
    """Show details, score breakdown and badge snippet for one server."""
    loader = _loader()
    records = loader.load_records(name)
    if not records:
        console.print(f"[red]Error:[/red] Server '{name}' not found")
        raise typer.Exit(1)

    record = records[0]
    console.print(f"\n[bold]{record.display_name}[/bold] ({record.name})")
    console.print(record.description)
    if repository_url := get_repository_url(record):
        console.print(f"Repository: {repository_url}")
    if record.is_remote:
        console.print(f"Endpoint: {record.origin.url}")
    if record.category:
        console.print(f"Category: {record.category.value}")
    console.print(f"Score: {_format_score(record.quality_score)}")

    if record.quality_score is not None:
        breakdown = calculate_quality_score(record, loader.load_records())
        table = Table(title="Score Breakdown")
        table.add_column("Dimension", style="cyan")
        table.add_column("Points", justify="right")
        for field, value in breakdown.model_dump().items():
            table.add_row(field, str(value))
        console.print(table)

    if markdown := get_badge_markdown_for_record(record):
        console.print("\nBadge:")
        console.print(markdown, markup=False, highlight=False)


@app.command()
def badge(
    name: str = typer.Argument(..., help="Server identity"),
    output: str = typer.Option(None, "--output", "-o", help="Write SVG here instead of stdout"),
) -> None:
    """Render the trust badge for a server."""
    records = _loader().load_records(name)
    svg = badge_for_record(records[0] if records else None).render()

    if output:
        Path(output).write_text(svg, encoding="utf-8")
        console.print(f"[green]Badge written to {output}[/green]")
    else:
        typer.echo(svg)


@app.command()
def evaluate(
    name: str = typer.Option(None, "--name", "-n", help="Only rescore this server"),
    force: bool = typer.Option(False, "--force", "-f", help="Rescore servers that already have a score"),
) -> None:
    """Recompute quality scores of evaluation documents and save them."""
    storage = _storage()
    results = storage.load_evaluations()
    records = [r.record for r in results if r.ok]
    failures = [r for r in results if not r.ok]

    if not records:
        console.print("[yellow]No evaluation documents found.[/yellow]")
        return

    targets = [r for r in records if name is None or r.name == name]
    if name and not targets:
        console.print(f"[red]Error:[/red] No evaluation document for '{name}'")
        raise typer.Exit(1)

    # Same population the API scores against: every manifest entry, placeholders included
    population = _loader().load_records()
    registry = EvaluatorRegistry()
    scored = registry.score_batch(targets, population=population, force=force)

    updated = 0
    skipped = 0
    for before, after in zip(targets, scored):
        if before.quality_score is not None and not force:
            skipped += 1
            continue
        storage.save_evaluation(after)
        updated += 1
        console.print(f"  {after.name}: {before.quality_score} -> {_format_score(after.quality_score)}")

    console.print(f"\n[bold green]Updated {updated} servers[/bold green], skipped {skipped}")
    if failures:
        console.print(f"[yellow]{len(failures)} documents could not be read (run 'validate')[/yellow]")


@app.command()
def validate() -> None:
    """Check every evaluation document against the record schema."""
    results = _storage().load_evaluations()
    failures = [r for r in results if not r.ok]

    for result in failures:
        console.print(f"[red]✗[/red] {result.key}: {escape(_truncate(result.error or '', 200))}")

    if failures:
        console.print(f"\n[red]{len(failures)} of {len(results)} documents are invalid[/red]")
        raise typer.Exit(1)

    console.print(f"[green]All {len(results)} evaluation documents are valid[/green]")


@app.command()
def export(
    format: str = typer.Option("json", "--format", "-f", help="Export format (json, csv)"),
    output: str = typer.Option("servers.json", "--output", "-o", help="Output file path"),
    category: str = typer.Option(None, "--category", help="Filter by category"),
) -> None:
    """Export catalog records to a file."""
    selected = _parse_category(category)
    records = [r for r in _loader().load_records() if selected is None or r.category == selected]

    if not records:
        console.print("[yellow]No servers found to export.[/yellow]")
        return

    output_path = Path(output)

    if format == "json":
        data = [record.model_dump(mode="json") for record in records]
        output_path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    elif format == "csv":
        with output_path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([
                "name",
                "display_name",
                "origin",
                "category",
                "language",
                "quality_score",
                "stars",
                "url",
                "description",
            ])
            for record in records:
                writer.writerow([
                    record.name,
                    record.display_name,
                    record.origin.kind,
                    record.category.value if record.category else "",
                    record.programming_language or "",
                    "" if record.quality_score is None else record.quality_score,
                    record.stars,
                    record.origin.url,
                    record.description,
                ])

    else:
        console.print(f"[red]Error:[/red] Unsupported format '{format}'. Use 'json' or 'csv'.")
        raise typer.Exit(1)

    console.print(f"[green]Exported {len(records)} servers to {output_path}[/green]")


@app.command()
def categories() -> None:
    """List the catalog categories."""
    for category in Category:
        console.print(category.value)


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address"),
    port: int = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the catalog API."""
    from src.api.app import run

    settings = get_settings()
    if reload and state.data_dir and state.data_dir != settings.data_dir:
        console.print("[red]Error:[/red] --reload reads the data directory from CATALOG_DATA_DIR")
        raise typer.Exit(1)

    settings = settings.model_copy(update={"data_dir": state.data_dir or settings.data_dir, "debug": state.debug})
    run(settings, host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
