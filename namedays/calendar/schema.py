"""Name-day record schema (Pydantic models).

A `NameDay` is one line of the calendar: the day a name is celebrated plus the gender tag of the
name. Records are frozen; the dataset is never mutated after parsing.
"""

from __future__ import annotations

from datetime import date
from enum import IntEnum, StrEnum
from functools import total_ordering

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Any leap year works: it only makes 29.2. a valid month/day pair.
_LEAP_YEAR = 2000


class Gender(StrEnum):
    """Gender tag of a name, valued by its token in the source file."""

    male = "MUZ"
    female = "ZENA"


class Month(IntEnum):
    """Calendar months, numbered from 1."""

    january = 1
    february = 2
    march = 3
    april = 4
    may = 5
    june = 6
    july = 7
    august = 8
    september = 9
    october = 10
    november = 11
    december = 12


@total_ordering
class MonthDay(BaseModel):
    """A day of the year without a year component (e.g. 24.12.)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @model_validator(mode="after")
    def validate_calendar_day(self) -> MonthDay:
        """Reject month/day pairs that never occur (30.2., 31.4., ...)."""

        try:
            date(_LEAP_YEAR, self.month, self.day)
        except ValueError as exc:
            raise ValueError(f"invalid day {self.day} for month {self.month}") from exc
        return self

    @classmethod
    def of(cls, month: int, day: int) -> MonthDay:
        return cls(month=month, day=day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return (self.month, self.day) < (other.month, other.day)

    def __str__(self) -> str:
        return f"{self.day}.{self.month}."


class NameDay(BaseModel):
    """One calendar entry: `name` is celebrated on `day`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    day: MonthDay
    name: str = Field(min_length=1, pattern=r"^\S+$")
    gender: Gender


CHRISTMAS_EVE = MonthDay.of(12, 24)
