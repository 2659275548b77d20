"""Pytest configuration and shared fixtures.

The conftest keeps `import namedays...` working when running `pytest` from a checkout without
installing the package, and provides helpers that write small calendar files into `tmp_path`.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Ensure `import namedays...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from namedays.calendar.schema import Gender, MonthDay, NameDay  # noqa: E402


@pytest.fixture
def write_calendar(tmp_path: Path) -> Callable[[list[str]], Path]:
    """Return a helper that writes calendar lines to a UTF-8 file and returns its path."""

    def _write(lines: list[str]) -> Path:
        path = tmp_path / "svatky.txt"
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def three_records() -> list[NameDay]:
    """A tiny calendar: one female name in February, two male names later in the year."""

    return [
        NameDay(day=MonthDay.of(2, 3), name="Blažena", gender=Gender.female),
        NameDay(day=MonthDay.of(6, 24), name="Jan", gender=Gender.male),
        NameDay(day=MonthDay.of(12, 25), name="Štěpán", gender=Gender.male),
    ]
