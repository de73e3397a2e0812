"""Notification composer.

Collects, per recipient, the report documents written for them and turns
the collection into one HTML message body.

Message layout
--------------
1. Prelude paragraph (coordinator or author wording) with a pointer to
   the check descriptions.
2. Coordinators only: a "Summary" link to the consolidated summary.
3. "Detail": one item per non-diff report, sorted by report file name.
   Coordinator items also link the raw ``.tsv`` file.
4. "New issues": one item per diff report, only when there are any.
"""
from __future__ import annotations

import html
import re
from collections.abc import Collection, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from qanotify.core.constants import (
    CHECK_DESCRIPTION_TEMPLATE,
    COORDINATOR_PRELUDE,
    NONCOORDINATOR_PRELUDE,
    SUMMARY_DOCUMENT_NAME,
)
from qanotify.readers.base import Report

_NON_WORD_RE = re.compile(r"\W", re.ASCII)


# ---------------------------------------------------------------------------
# Link layout
# ---------------------------------------------------------------------------

def _with_slash(url: str) -> str:
    return url if url.endswith("/") else url + "/"


@dataclass(frozen=True)
class LinkLayout:
    """URLs under which a batch's documents are published."""

    host_prefix: str
    batch_url: str

    @classmethod
    def build(
        cls,
        scheme: str,
        host_name: str,
        reports_url_path: str,
        batch_name: str,
    ) -> "LinkLayout":
        host_prefix = _with_slash(f"{scheme}://{host_name}")
        batch_url = _with_slash(f"{host_prefix}{reports_url_path.strip('/')}/{batch_name}")
        return cls(host_prefix=host_prefix, batch_url=batch_url)

    @property
    def summary_url(self) -> str:
        return self.batch_url + SUMMARY_DOCUMENT_NAME

    def report_prefix(self, report: Report) -> str:
        return f"{self.batch_url}{report.batch}/"

    def instance_prefix(self, browser_path: str) -> str:
        return self.host_prefix + browser_path.lstrip("/")


def _name_suffix(value: str) -> str:
    return _NON_WORD_RE.sub("", value).lower()


def document_name(
    report: Report,
    display_name: str,
    email: str | None = None,
    taken: Collection[str] = (),
) -> str:
    """Return the recipient document file name, e.g. ``missing_refs_smithj.html``.

    Names already in *taken* are not reused.  A colliding name falls back
    to the e-mail local part, then to a numeric suffix.
    """
    name = f"{report.stem}_{_name_suffix(display_name)}.html"
    if name in taken and email:
        name = f"{report.stem}_{_name_suffix(email.split('@')[0])}.html"
    base, counter = name[: -len(".html")], 2
    while name in taken:
        name = f"{base}_{counter}.html"
        counter += 1
    return name


# ---------------------------------------------------------------------------
# Digests
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DigestEntry:
    report: Report
    document: Path


class RecipientDigest:
    """Report documents written for one recipient.  Only ever grows."""

    def __init__(self, recipient: str) -> None:
        self.recipient = recipient
        self._entries: dict[Path, DigestEntry] = {}

    def add(self, report: Report, document: Path) -> None:
        self._entries[report.path] = DigestEntry(report=report, document=Path(document))

    def sorted_entries(self) -> list[DigestEntry]:
        """Entries ordered by report file name."""
        return sorted(self._entries.values(), key=lambda entry: entry.report.name)

    def __contains__(self, report_path: object) -> bool:
        return report_path in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class DigestBook:
    """Recipient to ``RecipientDigest`` map for a whole run.

    Coordinators are seeded up front so that each of them receives a
    message even when no report produced rows.
    """

    def __init__(self, coordinators: Iterable[str] = ()) -> None:
        self._digests: dict[str, RecipientDigest] = {}
        for coordinator in coordinators:
            self.get_or_create(coordinator)

    def get_or_create(self, recipient: str) -> RecipientDigest:
        digest = self._digests.get(recipient)
        if digest is None:
            digest = self._digests[recipient] = RecipientDigest(recipient)
        return digest

    def recipients(self) -> list[str]:
        return sorted(self._digests)

    def __iter__(self) -> Iterator[RecipientDigest]:
        for recipient in self.recipients():
            yield self._digests[recipient]

    def __contains__(self, recipient: object) -> bool:
        return recipient in self._digests

    def __len__(self) -> int:
        return len(self._digests)


# ---------------------------------------------------------------------------
# Message body
# ---------------------------------------------------------------------------

def format_report_item(entry: DigestEntry, is_coordinator: bool, layout: LinkLayout) -> str:
    report = entry.report
    prefix = layout.report_prefix(report)
    item = f"<li><a href='{prefix}{entry.document.name}'>{html.escape(report.title)}</a>"
    if is_coordinator and not report.is_diff:
        item += f" (<a href='{prefix}{report.name}'>tsv</a>)"
    return item + "</li>\n"


def _section(heading: str, items: list[str]) -> str:
    return f"<h3>{heading}</h3>\n<ul>{''.join(items)}</ul>\n"


def compose_message_body(
    digest: RecipientDigest,
    is_coordinator: bool,
    layout: LinkLayout,
    check_description_url: str,
) -> str:
    """Return the HTML body of *digest*'s message."""
    prelude = COORDINATOR_PRELUDE if is_coordinator else NONCOORDINATOR_PRELUDE
    check_description = CHECK_DESCRIPTION_TEMPLATE.format(url=check_description_url)
    parts = [f"<p>{prelude} {check_description}</p>\n"]

    if is_coordinator:
        parts.append(f"<h3><a href='{layout.summary_url}'>Summary</a></h3>\n")

    details: list[str] = []
    diffs: list[str] = []
    for entry in digest.sorted_entries():
        item = format_report_item(entry, is_coordinator, layout)
        if entry.report.is_diff:
            diffs.append(item)
        else:
            details.append(item)

    parts.append(_section("Detail", details))
    if diffs:
        parts.append(_section("New issues", diffs))

    return "".join(parts)
