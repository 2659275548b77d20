"""Console report over the bundled name-day calendar.

Run with `python -m namedays.report`. This module only formats query results; all filtering lives in
`namedays.calendar.queries`.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from namedays.calendar import queries
from namedays.calendar.schema import Month
from namedays.config.logging import configure_logging
from namedays.config.settings import load_settings

logger = logging.getLogger(__name__)


def print_names(names: Iterable[str], out: TextIO | None = None) -> int:
    """Write one name per line and return how many were written."""

    out = out or sys.stdout
    count = 0
    for name in names:
        print(name, file=out)
        count += 1
    return count


def print_november_names(out: TextIO | None = None) -> int:
    """Print every name celebrated in November."""

    return print_names(queries.names_in_month(Month.november), out)


def write_report(out: TextIO | None = None) -> None:
    """Print the November listing followed by the calendar summaries."""

    out = out or sys.stdout
    print("November:", file=out)
    print_november_names(out)
    print(f"Unique names: {queries.count_unique_names()}", file=out)
    print(f"Male names on the 1st of a month: {queries.count_male_first_of_month()}", file=out)
    print("From Christmas Eve:", file=out)
    print_names(queries.names_from_christmas_onward(), out)


def main() -> int:
    """CLI entry point; logs any failure and returns a non-zero exit status instead of raising."""

    try:
        settings = load_settings()
        configure_logging(settings.log_level)
        logger.debug("report dataset=%s", settings.dataset_path)
        write_report()
    except Exception:
        logger.exception("report failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
