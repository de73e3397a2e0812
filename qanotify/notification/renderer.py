"""HTML report document renderer.

Turns a ``NotificationPayload`` into a self-contained HTML page: title,
optional description and priority paragraphs, the issue table and a
footer naming the slice database and host.  Output is written to the
path chosen by the caller; the path is the document handle the composer
links to.

Header and cell text is HTML-escaped.  Descriptions come from the check
catalog and may carry markup, so they are inserted as-is.
"""
from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from string import Template

from qanotify.catalog.descriptions import Priority
from qanotify.core.constants import AUTHORTOOL_NOTE
from qanotify.readers.base import Row

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Row fragments
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Cell:
    """One display cell; ``link`` turns it into a hyperlink."""

    text: str
    link: str | None = None
    css_class: str | None = None


@dataclass(frozen=True)
class RowFragment:
    cells: tuple[Cell, ...]

    @property
    def texts(self) -> tuple[str, ...]:
        return tuple(cell.text for cell in self.cells)


def build_row_fragment(row: Row, id_index: int | None, link_prefix: str) -> RowFragment:
    """Convert *row* to display cells, linking the identifier cell.

    A row too short to reach *id_index* is rendered without a link.
    """
    cells = tuple(
        Cell(text=text, link=f"{link_prefix}{text}" if index == id_index else None)
        for index, text in enumerate(row)
    )
    return RowFragment(cells)


# ---------------------------------------------------------------------------
# NotificationPayload
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NotificationPayload:
    """Everything the renderer needs for one document."""

    title: str
    headers: tuple[str, ...]
    rows: tuple[RowFragment, ...]
    database_label: str
    host_label: str
    description: str | None = None
    priority: Priority | None = None


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@lru_cache(maxsize=None)
def _load_template(name: str) -> Template:
    return Template((TEMPLATE_DIR / name).read_text(encoding="utf-8"))


def _render_cell(cell: Cell) -> str:
    text = html.escape(cell.text, quote=False)
    if cell.css_class:
        text = f"<span class={cell.css_class}>{text}</span>"
    if cell.link:
        text = f'<a href="{html.escape(cell.link)}">{text}</a>'
    return f"<td>{text}</td>"


def render_header_row(headers: tuple[str, ...]) -> str:
    cells = "".join(f"<th>{html.escape(header, quote=False)}</th>" for header in headers)
    return f"<tr>{cells}</tr>"


def render_row(fragment: RowFragment) -> str:
    return "<tr>" + "".join(_render_cell(cell) for cell in fragment.cells) + "</tr>"


def render_document(payload: NotificationPayload) -> str:
    """Return the HTML page for *payload*."""
    description = ""
    if payload.description is not None:
        description = f"<p>\n{payload.description}\n</p>\n"

    priority = ""
    if payload.priority is not None:
        label = payload.priority.value
        priority = f"<p>\nPriority: <span class={label}>{label}</span>\n</p>\n"

    rows = "".join(f" {render_row(fragment)}\n" for fragment in payload.rows)

    return _load_template("report.html").substitute(
        title=html.escape(payload.title, quote=False),
        description=description,
        priority=priority,
        header_row=render_header_row(payload.headers),
        rows=rows,
        database_label=html.escape(payload.database_label, quote=False),
        host_label=html.escape(payload.host_label, quote=False),
        footer_note=AUTHORTOOL_NOTE,
    )


def write_document(payload: NotificationPayload, path: str | Path) -> Path:
    """Render *payload* to *path* and return the path."""
    path = Path(path)
    path.write_text(render_document(payload), encoding="utf-8")
    logger.debug("Wrote %s (%d row(s))", path, len(payload.rows))
    return path
