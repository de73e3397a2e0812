"""Tab-separated report reader.

Rules
-----
- The first non-blank line is the header row.
- Values are neither quoted nor escaped; a tab always separates cells.
- Blank lines are skipped.  Ragged rows are returned unchanged.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from qanotify.core.constants import REPORT_DELIMITER
from qanotify.readers.base import Headers, Report, Row

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryLine:
    """One ``title, count[, priority]`` line of a batch summary file."""

    title: str
    count: int
    priority: str | None = None


def read_table(path: str | Path) -> tuple[Headers, tuple[Row, ...]]:
    """Return the header row and data rows of a tab-separated file.

    Bytes that are not valid UTF-8 are replaced with U+FFFD rather than
    failing the read.  There is no limit on cell length.
    """
    path = Path(path)
    headers: Headers | None = None
    rows: list[Row] = []

    with open(path, "r", encoding="utf-8", errors="replace", newline="") as fh:
        for line in fh:
            line = line.rstrip("\r\n")
            if not line:
                continue
            cells = tuple(line.split(REPORT_DELIMITER))
            if headers is None:
                headers = Headers(cells)
            else:
                rows.append(Row(cells))

    return headers or Headers(), tuple(rows)


def read_report(path: str | Path) -> Report:
    path = Path(path)
    headers, rows = read_table(path)
    logger.debug("Read %d row(s) from %s", len(rows), path)
    return Report(path=path, headers=headers, rows=rows)


def read_summary(path: str | Path) -> list[SummaryLine]:
    """Parse a batch summary file.

    Lines with fewer than two cells or a non-integer count are skipped.
    A third cell, when present and non-empty, is the check's priority.
    """
    _, rows = read_table(path)
    lines: list[SummaryLine] = []
    for row in rows:
        if len(row) < 2:
            logger.warning("Skipping short summary line in %s: %r", path, row.cells)
            continue
        title, raw_count = row.cells[0].strip(), row.cells[1].strip()
        try:
            count = int(raw_count)
        except ValueError:
            logger.warning("Skipping summary line %r in %s: bad count %r", title, path, raw_count)
            continue
        priority = (row.get(2) or "").strip() or None
        lines.append(SummaryLine(title=title, count=count, priority=priority))
    return lines
