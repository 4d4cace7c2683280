# ABOUTME: Pydantic models for On This Day API data, history queries and time statistics.
# ABOUTME: Defines the structured types shared by the clock and history pipelines.

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from time_cli.dates import parse_lang_code, resolve_date


class Category(str, Enum):
    """Which section of the On This Day feed to show."""

    EVENTS = "events"
    BIRTHS = "births"
    DEATHS = "deaths"
    HOLIDAYS = "holidays"


class HistoryEntry(BaseModel):
    """A dated item from the events, births or deaths sections."""

    year: int
    text: str


class Holiday(BaseModel):
    """An observance from the holidays section."""

    text: str


class OnThisDayResponse(BaseModel):
    """Decoded On This Day payload. Sections missing from the JSON are empty."""

    events: list[HistoryEntry] = []
    births: list[HistoryEntry] = []
    deaths: list[HistoryEntry] = []
    holidays: list[Holiday] = []

    def entries_for(self, category: Category) -> list[HistoryEntry] | list[Holiday]:
        """Return the section matching a category, in API order."""
        return getattr(self, category.value)


class HistoryQuery(BaseModel):
    """User-supplied parameters for a history lookup."""

    model_config = ConfigDict(frozen=True)

    category: Category = Category.EVENTS
    language: str = "en"
    month: int | None = Field(default=None, ge=1, le=12)
    day: int | None = Field(default=None, ge=1, le=31)

    @field_validator("language")
    @classmethod
    def check_language(cls, v: str) -> str:
        return parse_lang_code(v)

    def resolve(self, today: date) -> tuple[int, int]:
        """Concrete (month, day) for this query, falling back to today per field."""
        return resolve_date(self.month, self.day, today)


class TimeStats(BaseModel):
    """Snapshot of how far through the day and year an instant is."""

    model_config = ConfigDict(frozen=True)

    day_of_year: int = Field(ge=1, le=366)
    total_days_in_year: int
    day_progress: float
    year_progress: float
    week_of_year: int
    is_leap: bool
    unix_timestamp: int
