from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import typer

from match_analyzer.core.config import settings
from match_analyzer.core.errors import MatchAnalyzerError
from match_analyzer.core.log import configure_logging
from match_analyzer.ingestion.match_rows import load_game_table
from match_analyzer.query.aggregator import run_query
from match_analyzer.query.loader import load_query

app = typer.Typer(
    no_args_is_help=True,
    help="Compiles data about matchsets: consolidates player rows and answers a stats query.",
)


def _package_version() -> str:
    try:
        return version("match-analyzer")
    except PackageNotFoundError:  # pragma: no cover
        return "unknown"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"match-analyzer {_package_version()}")
        raise typer.Exit()


def render_results(results: dict[str, str]) -> str:
    """Debug dump of the result mapping, keys sorted."""

    return repr({key: results[key] for key in sorted(results)})


@app.command()
def analyze(
    matches: Path = typer.Argument(
        ...,
        help="Path to matches CSV file.",
        dir_okay=False,
    ),
    query: Path = typer.Argument(
        ...,
        help="Path to query file.",
        dir_okay=False,
    ),
    show_version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Run QUERY against the games in MATCHES and print the merged statistics."""

    configure_logging(settings.log_level)

    try:
        parsed_query = load_query(query)
        games = load_game_table(
            matches,
            encoding=settings.csv_encoding,
            delimiter=settings.csv_delimiter,
        )
        results = run_query(parsed_query, games, stat_resolution=settings.stat_resolution)
    except MatchAnalyzerError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(render_results(results))
