# ABOUTME: Input validation for history lookups: language codes and month/day pairs.
# ABOUTME: Validates dates against a fixed leap year so Feb 29 is always accepted.

from datetime import date

from time_cli.config import REFERENCE_LEAP_YEAR
from time_cli.errors import InvalidDate, InvalidLanguageCode


def parse_lang_code(value: str) -> str:
    """Validate an ISO-639-1 language code (two ASCII letters) and lowercase it."""
    if len(value) == 2 and value.isascii() and value.isalpha():
        return value.lower()
    raise InvalidLanguageCode(value)


def resolve_date(month: int | None, day: int | None, today: date) -> tuple[int, int]:
    """Pick the month/day to look up and check that it exists.

    Each override falls back to today's value on its own, so ``--day 1`` alone
    means the first of the current month.

    Raises:
        InvalidDate: if the pair is not a date in a leap year (e.g. 04-31).
    """
    month = today.month if month is None else month
    day = today.day if day is None else day
    _reference_date(month, day)
    return month, day


def format_date_header(month: int, day: int) -> str:
    """Human-readable date such as "February 29"."""
    return f"{_reference_date(month, day):%B} {day}"


def _reference_date(month: int, day: int) -> date:
    try:
        return date(REFERENCE_LEAP_YEAR, month, day)
    except ValueError as e:
        raise InvalidDate(month, day) from e
