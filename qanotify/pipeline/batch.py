"""Batch notification run: wire discovery, routing, rendering and dispatch.

Stage order
-----------
1. discover_batch       : list report and summary files under the root
2. route_report         : split each report into per-recipient rows
3. write_document       : render each recipient's rows beside the report
4. consolidate_summaries: merge the batch summaries into summary.html
5. EmailSender.send     : one digest message per recipient

Reports are processed one at a time in discovery order.  Any file system
or transport error propagates and ends the run.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from qanotify.catalog.descriptions import CheckCatalog
from qanotify.core.constants import SUMMARY_DOCUMENT_NAME
from qanotify.core.host import resolve_host_name
from qanotify.core.settings import Settings
from qanotify.identity.table import IdentityTable
from qanotify.notification.composer import (
    DigestBook,
    LinkLayout,
    compose_message_body,
    document_name,
)
from qanotify.notification.email_sender import DeliveryReceipt, EmailSender
from qanotify.notification.renderer import NotificationPayload, write_document
from qanotify.readers.base import Report
from qanotify.readers.discovery import discover_batch
from qanotify.readers.tsv_reader import read_report, read_summary
from qanotify.routing.engine import route_report
from qanotify.summary.aggregator import (
    SummaryEntry,
    consolidate_summaries,
    summary_payload,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchContext:
    """Per-run values shared by every stage."""

    identities: IdentityTable
    catalog: CheckCatalog
    layout: LinkLayout
    database_label: str
    host_label: str
    instance_prefix: str
    check_description_url: str


@dataclass
class BatchResult:
    reports: int = 0
    documents: list[Path] = field(default_factory=list)
    summary_entries: list[SummaryEntry] = field(default_factory=list)
    summary_document: Path | None = None
    receipts: list[DeliveryReceipt] = field(default_factory=list)


def database_label_for(root: Path, prefix: str) -> str:
    """Slice database name for a reports root, e.g. ``test_slice_78``."""
    return prefix + root.resolve().name


def build_context(
    root: Path,
    settings: Settings,
    identities: IdentityTable,
    catalog: CheckCatalog,
    host_name: str | None = None,
) -> BatchContext:
    host_label = host_name or settings.host_name or resolve_host_name()
    layout = LinkLayout.build(
        scheme=settings.url_scheme,
        host_name=host_label,
        reports_url_path=settings.reports_url_path,
        batch_name=root.resolve().name,
    )
    return BatchContext(
        identities=identities,
        catalog=catalog,
        layout=layout,
        database_label=database_label_for(root, settings.db_name_prefix),
        host_label=host_label,
        instance_prefix=layout.instance_prefix(settings.instance_browser_path),
        check_description_url=settings.check_description_url,
    )


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------

def publish_report(report: Report, context: BatchContext, book: DigestBook) -> list[Path]:
    """Write one document per recipient of *report* and record it in *book*."""
    table = route_report(report, context.identities, link_prefix=context.instance_prefix)
    info = context.catalog.get(report.display_name)

    title = report.title
    if report.is_diff:
        title += " New Issues"

    documents: list[Path] = []
    taken: set[str] = set()
    for recipient, fragments in table.items():
        display_name = context.identities.display_name_for(recipient) or recipient.split("@")[0]
        payload = NotificationPayload(
            title=title,
            headers=report.headers.labels,
            rows=fragments,
            database_label=context.database_label,
            host_label=context.host_label,
            description=info.description if info else None,
            priority=info.priority if info else None,
        )
        name = document_name(report, display_name, email=recipient, taken=taken)
        taken.add(name)
        path = write_document(payload, report.path.parent / name)
        book.get_or_create(recipient).add(report, path)
        documents.append(path)
    return documents


def publish_summary(
    root: Path,
    summaries: list[Path],
    context: BatchContext,
) -> tuple[list[SummaryEntry], Path]:
    entries = consolidate_summaries(
        (read_summary(path) for path in summaries),
        context.catalog,
    )
    payload = summary_payload(entries, context.database_label, context.host_label)
    path = write_document(payload, root / SUMMARY_DOCUMENT_NAME)
    logger.info("Consolidated %d summary entries into %s", len(entries), path)
    return entries, path


def dispatch(book: DigestBook, context: BatchContext, sender: EmailSender) -> list[DeliveryReceipt]:
    receipts: list[DeliveryReceipt] = []
    for digest in book:
        body = compose_message_body(
            digest,
            is_coordinator=context.identities.is_coordinator_email(digest.recipient),
            layout=context.layout,
            check_description_url=context.check_description_url,
        )
        receipts.append(sender.send(digest.recipient, body))
    return receipts


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def run_batch(
    reports_root: str | Path,
    settings: Settings,
    identities: IdentityTable,
    catalog: CheckCatalog,
    sender: EmailSender,
    host_name: str | None = None,
) -> BatchResult:
    """Route, render and send every report under *reports_root*."""
    root = Path(reports_root)
    listing = discover_batch(root)
    context = build_context(root, settings, identities, catalog, host_name=host_name)

    result = BatchResult()
    book = DigestBook(identities.coordinator_emails)
    for path in listing.reports:
        report = read_report(path)
        result.documents.extend(publish_report(report, context, book))
        result.reports += 1

    result.summary_entries, result.summary_document = publish_summary(
        root, listing.summaries, context
    )
    result.receipts = dispatch(book, context, sender)
    return result
