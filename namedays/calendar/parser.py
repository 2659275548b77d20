"""Calendar line parser.

Each line holds exactly three whitespace-separated tokens:

    <day>.<month>. <name> <MUZ|ZENA>

e.g. `3.2. Blažena ZENA`. The parser is strict: a line either becomes a complete `NameDay` or
raises `MalformedRecordError`. Nothing is skipped or defaulted.
"""

from __future__ import annotations

import re

from pydantic import ValidationError

from namedays.calendar.schema import Gender, MonthDay, NameDay


class MalformedRecordError(ValueError):
    """Raised when a calendar line cannot be parsed into a `NameDay`."""


_DAY_RE = re.compile(r"(?P<day>[0-9]{1,2})\.(?P<month>[0-9]{1,2})\.")
_FIELD_COUNT = 3


def _parse_day(token: str) -> MonthDay:
    match = _DAY_RE.fullmatch(token)
    if not match:
        raise MalformedRecordError(f"date token {token!r} does not match D.M.")
    try:
        return MonthDay(month=int(match.group("month")), day=int(match.group("day")))
    except ValidationError as exc:
        raise MalformedRecordError(f"date token {token!r} is not a calendar day") from exc


def _parse_gender(token: str) -> Gender:
    try:
        return Gender(token.upper())
    except ValueError as exc:
        allowed = ", ".join(g.value for g in Gender)
        raise MalformedRecordError(f"gender token {token!r} is not one of {allowed}") from exc


def parse_line(line: str) -> NameDay:
    """Parse one calendar line into a `NameDay`.

    Raises:
        MalformedRecordError: If the line does not have exactly three tokens, the date token is
            not a valid `D.M.` day, or the gender token is unknown.
    """

    parts = line.split()
    if len(parts) != _FIELD_COUNT:
        raise MalformedRecordError(f"expected {_FIELD_COUNT} fields, got {len(parts)}: {line!r}")

    day_token, name, gender_token = parts
    return NameDay(day=_parse_day(day_token), name=name, gender=_parse_gender(gender_token))


def format_line(record: NameDay) -> str:
    """Render a record back into the calendar line format."""

    return f"{record.day} {record.name} {record.gender.value}"
