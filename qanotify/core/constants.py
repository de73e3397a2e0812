"""Fixed labels and prose shared across the notification pipeline.

Column label variants
---------------------
QA checks are written by different authors over several years, so the
same logical column is spelled more than one way.

AUTHOR_HEADERS : columns holding the most recent modifier, formatted
                 ``"Surname, Given[, date]"``.  A label matches when it is
                 one of these, ends with one of these, or is one of these
                 followed by ``_<n>`` (e.g. ``MostRecentAuthor_2``).
DB_ID_HEADERS  : identifier columns.  A label matches when it ends with
                 one of these; the first variant is tried across all
                 headers before the next.
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Report columns
# ---------------------------------------------------------------------------

AUTHOR_HEADERS: tuple[str, ...] = ("Modified", "MostRecentAuthor", "LastAuthor")

DB_ID_HEADERS: tuple[str, ...] = ("DB_ID", "DBID")

# ---------------------------------------------------------------------------
# Report files
# ---------------------------------------------------------------------------

REPORT_EXTENSION = ".tsv"
REPORT_DELIMITER = "\t"
DIFF_SUFFIX = "_diff"

SUMMARY_FILE_NAME = "summary.tsv"
SUMMARY_DOCUMENT_NAME = "summary.html"
SUMMARY_TITLE = "QA Report Summary"
SUMMARY_HEADINGS: tuple[str, ...] = ("Report", "Priority", "Issue Count")

# ---------------------------------------------------------------------------
# Message prose
# ---------------------------------------------------------------------------

COORDINATOR_PRELUDE = "The automated QA checks issued the reports below."

NONCOORDINATOR_PRELUDE = (
    "You are listed as the most recent author in the automated QA reports below."
)

CHECK_DESCRIPTION_TEMPLATE = (
    "A description of each check and hints regarding fixes can be found "
    "<a href={url}>here</a>."
)

AUTHORTOOL_NOTE = (
    "When connecting to this slice database via the curator tool to check "
    "instances, please use the authortool credentials."
)
