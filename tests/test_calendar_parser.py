"""Tests for the strict calendar line parser."""

from __future__ import annotations

import pytest

from namedays.calendar.parser import MalformedRecordError, format_line, parse_line
from namedays.calendar.schema import Gender, MonthDay


def test_parse_female_line() -> None:
    record = parse_line("3.2. Blažena ZENA")
    assert record.day == MonthDay.of(2, 3)
    assert record.name == "Blažena"
    assert record.gender == Gender.female


def test_parse_two_digit_day_and_month_with_trailing_newline() -> None:
    record = parse_line("24.12. Adam MUZ\n")
    assert record.day == MonthDay.of(12, 24)
    assert record.name == "Adam"
    assert record.gender == Gender.male


def test_parse_accepts_leading_zeros() -> None:
    assert parse_line("03.02. Blažena ZENA").day == MonthDay.of(2, 3)


@pytest.mark.parametrize("token", ["muz", "Muz", "MUZ"])
def test_gender_token_is_case_insensitive(token: str) -> None:
    assert parse_line(f"24.6. Jan {token}").gender == Gender.male


def test_name_casing_is_preserved() -> None:
    assert parse_line("1.1. mcDONALD MUZ").name == "mcDONALD"


@pytest.mark.parametrize(
    "line",
    [
        "",
        "3.2. Blažena",
        "1.1. Nový rok MUZ",
        "3.2 Blažena ZENA",
        "3/2. Blažena ZENA",
        "2024.3.2. Blažena ZENA",
        "30.2. Nikdo ZENA",
        "1.13. Nikdo MUZ",
        "3.2. Blažena FEMALE",
        "3.2. Blažena Z",
        "٣.٢. Blažena ZENA",
    ],
)
def test_malformed_lines_are_rejected(line: str) -> None:
    with pytest.raises(MalformedRecordError):
        parse_line(line)


def test_malformed_record_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_line("nonsense")


def test_format_line_is_parseable() -> None:
    line = "29.2. Horymír MUZ"
    assert format_line(parse_line(line)) == line
