"""Query functions over the name-day calendar.

Each query is a short filter -> map -> terminal pipeline. Queries accept an optional `records`
iterable; without it they load the bundled calendar themselves (a fresh load per call). The load
happens when the query is called, not when its result is first iterated, so a missing file is
reported immediately.

All queries preserve record order. Sequence results are lazy iterators.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import dropwhile, islice

from namedays.calendar.loader import load_all
from namedays.calendar.schema import CHRISTMAS_EVE, Gender, Month, MonthDay, NameDay


class QueryError(ValueError):
    """Raised when a query receives an argument it cannot answer for."""


_JUNE_SKIP = 10


def _source(records: Iterable[NameDay] | None) -> Iterator[NameDay]:
    if records is None:
        return load_all()
    return iter(records)


def _month(month: int) -> Month:
    try:
        return Month(month)
    except ValueError as exc:
        raise QueryError(f"month must be between 1 and 12, got {month!r}") from exc


def _is_female(record: NameDay) -> bool:
    return record.gender == Gender.female


def by_month(month: int, *, records: Iterable[NameDay] | None = None) -> Iterator[NameDay]:
    """Return all records celebrated in `month`."""

    wanted = _month(month)
    return (r for r in _source(records) if r.day.month == wanted)


def names_in_month(month: int, *, records: Iterable[NameDay] | None = None) -> Iterator[str]:
    """Return the names celebrated in `month`."""

    return (r.name for r in by_month(month, records=records))


def day_of_name(name: str, *, records: Iterable[NameDay] | None = None) -> Iterator[MonthDay]:
    """Return every day on which `name` (exact, case-sensitive) is celebrated."""

    return (r.day for r in _source(records) if r.name == name)


def all_male_names(*, records: Iterable[NameDay] | None = None) -> Iterator[str]:
    return (r.name for r in _source(records) if r.gender == Gender.male)


def all_female_names(*, records: Iterable[NameDay] | None = None) -> Iterator[str]:
    return (r.name for r in _source(records) if _is_female(r))


def names_on_day(day: MonthDay, *, records: Iterable[NameDay] | None = None) -> Iterator[str]:
    """Return the names celebrated exactly on `day`."""

    return (r.name for r in _source(records) if r.day == day)


def female_names_in_month(
        month: int,
        *,
        records: Iterable[NameDay] | None = None,
) -> Iterator[str]:
    """Return the female names celebrated in `month`."""

    wanted = _month(month)
    return (r.name for r in _source(records) if _is_female(r) and r.day.month == wanted)


def count_male_first_of_month(*, records: Iterable[NameDay] | None = None) -> int:
    """Count male names celebrated on the first day of any month."""

    return sum(1 for r in _source(records) if r.gender == Gender.male and r.day.day == 1)


def unique_names(*, records: Iterable[NameDay] | None = None) -> Iterator[str]:
    """Return each name once, in order of its first occurrence."""

    return iter(dict.fromkeys(r.name for r in _source(records)))


def count_unique_names(*, records: Iterable[NameDay] | None = None) -> int:
    return sum(1 for _ in unique_names(records=records))


def names_in_june_skip_first_10(*, records: Iterable[NameDay] | None = None) -> Iterator[str]:
    """Return June names after the first ten; empty when June has ten names or fewer."""

    return islice(names_in_month(Month.june, records=records), _JUNE_SKIP, None)


def names_from_christmas_onward(*, records: Iterable[NameDay] | None = None) -> Iterator[str]:
    """Return names from the first record on or after 24.12. to the end of the calendar.

    This drops the leading records dated before Christmas Eve and keeps everything after the first
    one that is not, including any later record with an earlier date. It equals a `day >= 24.12.`
    filter only when the records are sorted by day, which the bundled calendar is.
    """

    rest = dropwhile(lambda r: r.day < CHRISTMAS_EVE, _source(records))
    return (r.name for r in rest)
