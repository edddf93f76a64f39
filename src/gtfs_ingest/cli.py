"""Command-line interface for GTFS feed ingestion."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from gtfs_ingest.config.settings import IngestionConfig

app = typer.Typer(
    name="gtfs-ingest",
    help="Decode GTFS transit feeds into typed records.",
    no_args_is_help=True,
)

console = Console()

FeedPath = Annotated[
    Path,
    typer.Argument(
        help="Directory holding the feed's .txt tables.",
        exists=True,
        file_okay=False,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file.",
        exists=True,
        dir_okay=False,
    ),
]


def _load_config(config: Path | None) -> "IngestionConfig":
    from gtfs_ingest.config.loader import load_config
    from gtfs_ingest.config.settings import IngestionConfig

    if config is None:
        return IngestionConfig()
    console.print(f"[blue]Loading configuration from {config}[/blue]")
    return load_config(config)


@app.command()
def ingest(
    path: FeedPath,
    config: ConfigOption = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", "-l", help="Override the configured log level."),
    ] = None,
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Emit logs as JSON lines."),
    ] = False,
) -> None:
    """Decode a feed and report the records read per table."""
    from gtfs_ingest.ingestion.engine import run_ingestion
    from gtfs_ingest.ingestion.errors import GTFSIngestError
    from gtfs_ingest.ingestion.sources import load_directory_source
    from gtfs_ingest.utils.logging import configure_logging

    try:
        ingestion_config = _load_config(config)
        configure_logging(
            level=log_level or ingestion_config.logging.level,
            json_output=json_logs or ingestion_config.logging.json_output,
        )
        source = load_directory_source(path, ingestion_config.source)
        result = run_ingestion(source, config=ingestion_config)
    except (GTFSIngestError, FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    table = Table(title=f"Feed {path.name}")
    table.add_column("Table", style="cyan")
    table.add_column("Records", style="green", justify="right")
    for name in result.order:
        table.add_row(name, str(result.counts[name]))
    console.print(table)

    if result.skipped:
        console.print(f"[dim]Skipped tables: {', '.join(result.skipped)}[/dim]")
    console.print(f"[green]Read {result.total_records} records.[/green]")


@app.command()
def order(
    path: FeedPath,
    config: ConfigOption = None,
) -> None:
    """Show the order in which a feed's tables would be read."""
    from gtfs_ingest.ingestion.engine import IngestionEngine
    from gtfs_ingest.ingestion.errors import GTFSIngestError
    from gtfs_ingest.ingestion.sources import load_directory_source

    try:
        ingestion_config = _load_config(config)
        source = load_directory_source(path, ingestion_config.source)
        engine = IngestionEngine(config=ingestion_config)
        plan = engine.plan([t.name for t in source])
    except (GTFSIngestError, FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    for position, name in enumerate(plan, start=1):
        marker = "" if name in engine.registry else " [dim](no decoder)[/dim]"
        console.print(f"{position:>2}. {name}{marker}")


if __name__ == "__main__":
    app()
