# ABOUTME: Clock pipeline: derives day/year progress statistics from an instant.
# ABOUTME: Also formats the current time and the statistics block for the terminal.

from datetime import date, datetime

from time_cli.models import TimeStats

SECONDS_IN_DAY = 86_400


def is_leap_year(year: int) -> bool:
    """A year is leap when its Dec 31 is day 366."""
    return date(year, 12, 31).timetuple().tm_yday == 366


def compute_time_statistics(now: datetime) -> TimeStats:
    """Compute TimeStats for the given instant.

    Pure function of ``now``: pass an aware datetime for a correct Unix timestamp,
    wall-clock fields are taken as-is.
    """
    is_leap = is_leap_year(now.year)
    total_days_in_year = 366 if is_leap else 365

    seconds_into_day = now.hour * 3600 + now.minute * 60 + now.second
    day_progress = seconds_into_day / SECONDS_IN_DAY * 100

    day_of_year = now.timetuple().tm_yday
    year_progress = day_of_year / total_days_in_year * 100

    return TimeStats(
        day_of_year=day_of_year,
        total_days_in_year=total_days_in_year,
        day_progress=day_progress,
        year_progress=year_progress,
        week_of_year=now.isocalendar()[1],
        is_leap=is_leap,
        unix_timestamp=int(now.timestamp()),
    )


def render_current_time(now: datetime) -> str:
    """Rich markup announcing the current time."""
    return f"[bold]The current time is:[/bold]\n{now:%A, %B %d, %Y %I:%M:%S %p}"


def render_time_statistics(stats: TimeStats) -> str:
    """Rich markup for the statistics block; percentages are rounded here only."""
    lines = [
        "[bold]Time statistics:[/bold]",
        "----------------",
        f"Day of the year: {stats.day_of_year}/{stats.total_days_in_year}",
        f"Week of the year: {stats.week_of_year}",
        f"Is it a leap year? {'Yes' if stats.is_leap else 'No'}",
        f"Seconds since Unix epoch: {stats.unix_timestamp}",
        "",
        "Progress:",
        f"Day is {stats.day_progress:.2f}% complete",
        f"Year is {stats.year_progress:.2f}% complete",
    ]
    return "\n".join(lines)
