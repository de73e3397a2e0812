"""Summary aggregator.

Folds the per-batch ``summary.tsv`` files into one table ordered by
report title, joined with each check's priority.

Merge rule: when a title appears in more than one summary source, the
count read last replaces the earlier one.  Counts are never added
together.

Priority for a title is taken from the check catalog (keyed by the title
with spaces replaced by underscores), then from the summary line's own
priority column, and otherwise defaults to Medium.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from qanotify.catalog.descriptions import DEFAULT_PRIORITY, CheckCatalog, Priority
from qanotify.core.constants import SUMMARY_HEADINGS, SUMMARY_TITLE
from qanotify.notification.renderer import Cell, NotificationPayload, RowFragment
from qanotify.readers.tsv_reader import SummaryLine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryEntry:
    report_title: str
    priority: Priority
    issue_count: int

    def to_fragment(self) -> RowFragment:
        return RowFragment((
            Cell(self.report_title),
            Cell(self.priority.value, css_class=self.priority.value),
            Cell(str(self.issue_count)),
        ))


def _priority_for(line: SummaryLine, catalog: CheckCatalog) -> Priority:
    priority = catalog.priority_for(line.title.replace(" ", "_"))
    if priority is not None:
        return priority
    if line.priority:
        try:
            return Priority.parse(line.priority)
        except ValueError:
            logger.warning("Ignoring unknown priority %r for %r", line.priority, line.title)
    return DEFAULT_PRIORITY


def consolidate_summaries(
    sources: Iterable[Iterable[SummaryLine]],
    catalog: CheckCatalog | None = None,
) -> list[SummaryEntry]:
    """Merge summary sources into entries sorted by title (last write wins)."""
    catalog = catalog or CheckCatalog()
    latest: dict[str, SummaryLine] = {}
    for source in sources:
        for line in source:
            if line.title in latest:
                logger.debug(
                    "Summary count for %r replaced: %d -> %d",
                    line.title,
                    latest[line.title].count,
                    line.count,
                )
            latest[line.title] = line

    return [
        SummaryEntry(
            report_title=title,
            priority=_priority_for(latest[title], catalog),
            issue_count=latest[title].count,
        )
        for title in sorted(latest)
    ]


def summary_payload(
    entries: Iterable[SummaryEntry],
    database_label: str,
    host_label: str,
) -> NotificationPayload:
    """Return the renderer payload for the consolidated summary document."""
    return NotificationPayload(
        title=SUMMARY_TITLE,
        headers=SUMMARY_HEADINGS,
        rows=tuple(entry.to_fragment() for entry in entries),
        database_label=database_label,
        host_label=host_label,
    )
