# ABOUTME: Tests for rendering On This Day responses as rich tables.
# ABOUTME: Checks ordering, per-category headers, placeholders and text wrapping.

import io

from rich.console import Console

from time_cli.models import Category, HistoryEntry, Holiday, OnThisDayResponse
from time_cli.render import COLUMN_HEADERS, render_history


def _to_text(table, width: int = 100) -> str:
    console = Console(file=io.StringIO(), width=width)
    console.print(table)
    return console.file.getvalue()


class TestRenderHistory:
    def test_events_are_most_recent_first(self):
        """Events render in descending year order, reversed from the API.

        Implementation: Renders events [1990 A, 2005 B].
        Passing implies: 2005/B appears before 1990/A.
        """
        resp = OnThisDayResponse(events=[HistoryEntry(year=1990, text="A"), HistoryEntry(year=2005, text="B")])
        text = _to_text(render_history(resp, Category.EVENTS, 10, 16, width=100))

        assert text.index("2005") < text.index("1990")
        assert "On This Day: October 16" in text

    def test_headers_follow_category(self):
        """Births and deaths use their own column headers.

        Implementation: Renders births and deaths tables and inspects the column headers.
        Passing implies: Headers come from the category mapping table.
        """
        resp = OnThisDayResponse(
            births=[HistoryEntry(year=1854, text="Oscar Wilde")],
            deaths=[HistoryEntry(year=1793, text="Marie Antoinette")],
        )
        for category in (Category.EVENTS, Category.BIRTHS, Category.DEATHS):
            table = render_history(resp, category, 10, 16, width=100)
            assert tuple(column.header for column in table.columns) == COLUMN_HEADERS[category]

        assert COLUMN_HEADERS[Category.BIRTHS] == ("Born", "Person")
        assert COLUMN_HEADERS[Category.DEATHS] == ("Died", "Person")

    def test_empty_category_gets_placeholder_row(self):
        """An empty dated section renders a single placeholder row.

        Implementation: Renders deaths from a response that only has events.
        Passing implies: The table is never empty.
        """
        resp = OnThisDayResponse(events=[HistoryEntry(year=2000, text="x")])
        table = render_history(resp, Category.DEATHS, 1, 1, width=100)

        assert table.row_count == 1
        assert "No deaths found for this date." in _to_text(table)

    def test_holidays_single_column(self):
        """Holidays render in one column.

        Implementation: Renders two holidays.
        Passing implies: Holiday text is shown in API order without a year column.
        """
        resp = OnThisDayResponse(holidays=[Holiday(text="World Food Day"), Holiday(text="Boss's Day")])
        table = render_history(resp, Category.HOLIDAYS, 10, 16, width=100)
        text = _to_text(table)

        assert len(table.columns) == 1
        assert table.row_count == 2
        assert text.index("World Food Day") < text.index("Boss's Day")

    def test_no_holidays_placeholder(self):
        """No holidays produces one explanatory row.

        Implementation: Renders holidays from an empty response.
        Passing implies: Users see a message instead of an empty table.
        """
        table = render_history(OnThisDayResponse(), Category.HOLIDAYS, 2, 29, width=100)
        assert table.row_count == 1
        assert "No holidays found for this date." in _to_text(table)

    def test_text_is_wrapped_to_width(self):
        """Long text is word-wrapped to the width minus the column margin.

        Implementation: Renders one long event at width 60 and inspects the cell text.
        Passing implies: No wrapped line exceeds 60 - 16 characters.
        """
        long_text = " ".join(["history"] * 40)
        resp = OnThisDayResponse(events=[HistoryEntry(year=1066, text=long_text)])
        table = render_history(resp, Category.EVENTS, 10, 14, width=60)

        cell = list(table.columns[1].cells)[0]
        lines = cell.plain.splitlines()
        assert len(lines) > 1
        assert all(len(line) <= 44 for line in lines)

    def test_minimum_width_enforced(self):
        """Tiny widths are raised to the minimum before wrapping.

        Implementation: Renders a holiday at width 10.
        Passing implies: Wrapping uses at least 40 - 8 columns.
        """
        resp = OnThisDayResponse(holidays=[Holiday(text=" ".join(["day"] * 20))])
        table = render_history(resp, Category.HOLIDAYS, 1, 1, width=10)

        lines = list(table.columns[0].cells)[0].plain.splitlines()
        assert max(len(line) for line in lines) > 10
        assert all(len(line) <= 32 for line in lines)

    def test_markup_in_text_is_literal(self):
        """Square brackets in Wikipedia text are not treated as rich markup.

        Implementation: Renders an event containing "[bold]".
        Passing implies: Text is shown verbatim.
        """
        resp = OnThisDayResponse(events=[HistoryEntry(year=1900, text="Quote [bold] here")])
        assert "Quote [bold] here" in _to_text(render_history(resp, Category.EVENTS, 1, 1, width=100))
