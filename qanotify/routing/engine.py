"""Routing engine.

Splits one report into per-recipient row lists.

Rules
-----
- Every coordinator receives every row, and an entry even when the
  report has no rows.
- A row is also routed to the e-mail of each non-coordinator author
  resolved on it, at most once per recipient.
- Row order within every recipient's list is the report's row order.
- Authors missing from the curator list are dropped silently.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from qanotify.core.constants import DB_ID_HEADERS
from qanotify.identity.table import IdentityTable
from qanotify.notification.renderer import RowFragment, build_row_fragment
from qanotify.readers.base import Report
from qanotify.routing.author_resolver import AuthorResolver

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# RoutingTable
# ---------------------------------------------------------------------------

class RoutingTable:
    """Recipient e-mail to ordered row fragments for one report.

    Entries are kept in insertion order.  ``get_or_create`` is idempotent:
    asking twice for the same recipient returns the same list.
    """

    def __init__(self, report: Report, seed: Iterable[str] = ()) -> None:
        self.report = report
        self._entries: dict[str, list[RowFragment]] = {}
        for recipient in seed:
            self.get_or_create(recipient)

    def get_or_create(self, recipient: str) -> list[RowFragment]:
        return self._entries.setdefault(recipient, [])

    def append(self, recipient: str, fragment: RowFragment) -> None:
        self.get_or_create(recipient).append(fragment)

    def rows_for(self, recipient: str) -> tuple[RowFragment, ...]:
        return tuple(self._entries.get(recipient, ()))

    def recipients(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def items(self) -> Iterator[tuple[str, tuple[RowFragment, ...]]]:
        for recipient, fragments in self._entries.items():
            yield recipient, tuple(fragments)

    def __contains__(self, recipient: object) -> bool:
        return recipient in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------

def route_report(
    report: Report,
    identities: IdentityTable,
    link_prefix: str = "",
) -> RoutingTable:
    """Build the ``RoutingTable`` for *report*.

    Parameters
    ----------
    report:
        The parsed report.
    identities:
        Curator lookups and coordinator membership.
    link_prefix:
        URL prefix joined to identifier cells to form their hyperlink.
    """
    id_index = report.headers.index_ending_with(DB_ID_HEADERS)
    if id_index is None:
        logger.debug("%s has no identifier column", report.name)

    resolver = AuthorResolver(report.headers)
    coordinators = identities.coordinator_emails
    table = RoutingTable(report, seed=coordinators)

    for row in report.rows:
        fragment = build_row_fragment(row, id_index, link_prefix)

        for coordinator in coordinators:
            table.append(coordinator, fragment)

        routed: set[str] = set()
        for key in resolver.resolve(row):
            # Coordinators already hold every row.
            if identities.is_coordinator_key(key):
                continue
            recipient = identities.email_for(key)
            if recipient is None:
                logger.debug("Author %s in %s is not a known curator", key, report.name)
                continue
            if recipient in routed or identities.is_coordinator_email(recipient):
                continue
            routed.add(recipient)
            table.append(recipient, fragment)

    logger.info(
        "Routed %d row(s) of %s to %d recipient(s)",
        len(report.rows),
        report.name,
        len(table),
    )
    return table
