"""Load the name-day calendar from its text file.

Every call reads the file again and yields freshly parsed records; nothing is cached between calls,
so a malformed file fails every load, not only the first one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from namedays.calendar.parser import MalformedRecordError, parse_line
from namedays.calendar.schema import NameDay
from namedays.config.settings import load_settings

logger = logging.getLogger(__name__)


class SourceUnavailableError(RuntimeError):
    """Raised when the calendar file cannot be located or opened."""


def _open(path: Path) -> TextIO:
    try:
        return path.open(encoding="utf-8")
    except OSError as exc:
        raise SourceUnavailableError(f"Cannot open name-day calendar {path}: {exc}") from exc


def _iter_records(path: Path) -> Iterator[NameDay]:
    count = 0
    with _open(path) as handle:
        logger.debug("opened path=%s", path)
        for lineno, line in enumerate(handle, start=1):
            try:
                record = parse_line(line)
            except MalformedRecordError as exc:
                raise MalformedRecordError(f"{path.name}:{lineno}: {exc}") from exc
            count += 1
            yield record
    logger.debug("loaded path=%s records=%d", path, count)


def load_all(path: Path | None = None) -> Iterator[NameDay]:
    """Return a lazy, one-pass iterator over all calendar records in file order.

    The file is probed before this function returns, so a missing file fails at call time. The
    handle used for reading is only opened on the first `next()` and is closed when the iterator is
    exhausted, on a parse error, or when the iterator is closed. An iterator that is never started
    holds no open file.

    Raises:
        SourceUnavailableError: If the file cannot be opened.
        MalformedRecordError: While iterating, if a line cannot be parsed.
    """

    if path is None:
        path = load_settings().dataset_path

    _open(path).close()
    return _iter_records(path)
