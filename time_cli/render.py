# ABOUTME: Renders an On This Day response as a rich table.
# ABOUTME: Maps each category to its column headers and wraps text to the terminal width.

import shutil
import textwrap

from rich.table import Table
from rich.text import Text

from time_cli.config import MIN_TERMINAL_WIDTH
from time_cli.dates import format_date_header
from time_cli.models import Category, OnThisDayResponse

# Category -> (first column, second column) for the dated sections.
COLUMN_HEADERS: dict[Category, tuple[str, str]] = {
    Category.EVENTS: ("Year", "Event"),
    Category.BIRTHS: ("Born", "Person"),
    Category.DEATHS: ("Died", "Person"),
}

HOLIDAY_MARGIN = 8
DATED_MARGIN = 16


def terminal_width() -> int:
    """Detected terminal width, never below MIN_TERMINAL_WIDTH."""
    return max(shutil.get_terminal_size().columns, MIN_TERMINAL_WIDTH)


def render_history(
    response: OnThisDayResponse,
    category: Category,
    month: int,
    day: int,
    width: int | None = None,
) -> Table:
    """Build the table for one category of a response.

    Dated sections are shown most recent first, i.e. reversed from the API,
    which lists them by ascending year.
    """
    width = max(width, MIN_TERMINAL_WIDTH) if width is not None else terminal_width()
    table = Table(title=f"On This Day: {format_date_header(month, day)}", show_lines=True)

    if category is Category.HOLIDAYS:
        table.add_column("Holiday")
        wrap_at = width - HOLIDAY_MARGIN
        if not response.holidays:
            table.add_row("No holidays found for this date.")
        for holiday in response.holidays:
            table.add_row(Text(textwrap.fill(holiday.text, wrap_at)))
        return table

    when, what = COLUMN_HEADERS[category]
    table.add_column(when, style="yellow", justify="right", no_wrap=True)
    table.add_column(what)
    wrap_at = width - DATED_MARGIN
    entries = response.entries_for(category)
    if not entries:
        table.add_row("-", f"No {category.value} found for this date.")
    for entry in reversed(entries):
        table.add_row(str(entry.year), Text(textwrap.fill(entry.text, wrap_at)))
    return table
