# ABOUTME: Typer command-line entry point for the time CLI.
# ABOUTME: Default action prints the current time or statistics; "history" shows On This Day data.

import asyncio
import logging
from contextlib import nullcontext
from datetime import date, datetime
from typing import NoReturn

import typer
from rich.console import Console

from time_cli.clock import compute_time_statistics, render_current_time, render_time_statistics
from time_cli.config import LOG_FORMAT, VERSION, log_level
from time_cli.dates import parse_lang_code
from time_cli.deps import create_http_client
from time_cli.errors import InvalidDate, InvalidLanguageCode, TimeCliError
from time_cli.history_service import HistoryFetcher
from time_cli.models import Category, HistoryQuery, OnThisDayResponse
from time_cli.render import render_history

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Show the current time, or what happened on this day in history.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else log_level(),
        format=LOG_FORMAT,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"time-cli {VERSION}")
        raise typer.Exit()


def _language_callback(value: str) -> str:
    """Reject bad language codes at parse time, before any other work."""
    try:
        return parse_lang_code(value)
    except InvalidLanguageCode as e:
        raise typer.BadParameter(e.message) from e


def _fail(error: TimeCliError) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    statistics: bool = typer.Option(False, "--statistics", "-s", help="Also show progress through the day and year."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """Display the current time (optionally with statistics)."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is not None:
        return

    now = datetime.now().astimezone()
    console = Console()
    if statistics:
        console.print(render_time_statistics(compute_time_statistics(now)))
    else:
        console.print(render_current_time(now))


async def _fetch_history(language: str, category: Category, month: int, day: int) -> OnThisDayResponse:
    async with create_http_client() as client:
        fetcher = HistoryFetcher(client)
        return await fetcher.fetch(language, category, month, day)


@app.command()
def history(
    category: Category = typer.Option(
        Category.EVENTS, "--category", "-c", case_sensitive=False, help="Which section of the feed to show."
    ),
    language: str = typer.Option(
        "en", "--language", "-l", metavar="LANG", callback=_language_callback, help="Wikipedia language code."
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress the spinner (useful for scripts)."),
    month: int | None = typer.Option(None, "--month", "-m", min=1, max=12, help="Month to look up (default: today)."),
    day: int | None = typer.Option(None, "--day", "-d", min=1, max=31, help="Day to look up (default: today)."),
) -> None:
    """Fetch "On This Day" events, births, deaths or holidays from Wikipedia."""
    query = HistoryQuery(category=category, language=language, month=month, day=day)
    try:
        month, day = query.resolve(date.today())
    except InvalidDate as e:
        _fail(e)

    if quiet:
        spinner = nullcontext()
    else:
        spinner = Console(stderr=True).status(
            f"Fetching {query.category.value} for {month:02}-{day:02} in '{query.language}'..."
        )

    try:
        with spinner:
            response = asyncio.run(_fetch_history(query.language, query.category, month, day))
    except TimeCliError as e:
        _fail(e)

    Console().print(render_history(response, query.category, month, day))
