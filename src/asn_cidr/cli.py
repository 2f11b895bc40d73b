"""CLI interface for asn-cidr."""

import asyncio
import csv
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from asn_cidr.cidr import AddressFamily
from asn_cidr.config import BROWSER_USER_AGENT, get_settings
from asn_cidr.exceptions import SourceError, UnknownSource
from asn_cidr.logging import configure_logging
from asn_cidr.models.source import SourceKind
from asn_cidr.pipeline import RunResult, fetch_and_run
from asn_cidr.sources import SOURCES

app = typer.Typer(
    name="asn-cidr",
    help="Download the announced CIDR prefixes of an autonomous system.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_asn(value: str) -> int:
    """Accept ``13335`` as well as ``AS13335``."""
    text = value.strip().upper()
    if text.startswith("AS"):
        text = text[2:]
    if not text.isdigit() or int(text) <= 0:
        raise typer.BadParameter(f"ASN must be a positive number, optionally prefixed with AS: {value!r}")
    return int(text)


@app.command()
def fetch(
    asn: str = typer.Option(..., "--as", help="Autonomous system number, e.g. 13335 or AS13335"),
    cidr_version: str = typer.Option("4", "--cidr-version", "-c", help="CIDR version: 4 or 6"),
    source: str = typer.Option(
        "0",
        "--source",
        "-i",
        help="Source: 0/bgpview (api.bgpview.io), 1/he (bgp.he.net), 2/bgptools (bgp.tools)",
    ),
    output_dir: Path = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Root output directory; files go to <dir>/<source host>/ (default: ASN_CIDR_OUTPUT_DIR or .)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the captured prefixes"),
    log_level: str = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL"),
):
    """Fetch the prefixes of one ASN from one source and write CSV + TXT files."""
    settings = get_settings()

    level = (log_level or settings.log_level).upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"log level must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level")
    configure_logging(level)

    asn_number = parse_asn(asn)
    try:
        family = AddressFamily.parse(cidr_version)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--cidr-version") from e

    try:
        kind = SourceKind.parse(source)
    except UnknownSource as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(2) from e

    root = output_dir if output_dir is not None else settings.output_dir

    console.print(
        Panel(
            f"[bold]AS{asn_number}[/bold] {family.label} prefixes from [bold]{kind.host}[/bold]",
            title="asn-cidr",
        )
    )

    async def _run() -> RunResult:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(f"Fetching {kind.host}...", total=None)
            return await fetch_and_run(
                kind,
                asn_number,
                family,
                root,
                user_agent=_user_agent_override(settings.user_agent),
                timeout=settings.timeout,
            )

    try:
        result = asyncio.run(_run())
    except SourceError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        err_console.print("[dim]No output files were written.[/dim]")
        raise typer.Exit(1) from e

    if verbose:
        _display_rows(result)

    _display_summary(result)


@app.command("sources")
def list_sources():
    """List the supported sources and the columns each one writes."""
    table = Table(title="Sources")
    table.add_column("Index", justify="right")
    table.add_column("Name")
    table.add_column("Host")
    table.add_column("CSV columns")

    for kind, source_cls in SOURCES.items():
        table.add_row(str(kind.index), kind.value, kind.host, ", ".join(source_cls.header))

    console.print(table)


def _user_agent_override(configured: str) -> str | None:
    """Only pass the configured User-Agent when it was changed from the default."""
    if configured == BROWSER_USER_AGENT:
        return None
    return configured


def _display_rows(result: RunResult) -> None:
    with result.csv_path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    if not rows:
        return

    table = Table(title=f"AS{result.asn} {result.family.label} prefixes")
    for column in rows[0]:
        table.add_column(column)
    for row in rows[1:]:
        table.add_row(*row)
    console.print(table)


def _display_summary(result: RunResult) -> None:
    if result.count == 0:
        console.print(f"[yellow]No {result.family.label} prefixes found for AS{result.asn}.[/yellow]")
    else:
        console.print(f"[green]Captured {result.count} {result.family.label} prefixes.[/green]")
    console.print(f"  CSV: {result.csv_path}")
    console.print(f"  TXT: {result.txt_path}")


def main() -> None:
    """Entry point for console_scripts."""
    app()


if __name__ == "__main__":
    main()
