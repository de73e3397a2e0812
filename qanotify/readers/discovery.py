"""Batch discovery: enumerate report and summary files under a reports root.

The reports root holds one sub-directory per QA batch.  Only
sub-directories of the root are scanned, and inside each only ``.tsv``
files are considered.  The batch summary file is collected separately
from the reports.

Files are returned in the file system's natural enumeration order.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from qanotify.core.constants import REPORT_EXTENSION, SUMMARY_FILE_NAME
from qanotify.core.errors import ReportsDirectoryError

logger = logging.getLogger(__name__)


@dataclass
class BatchListing:
    """Report and summary files found under one reports root."""

    root: Path
    reports: list[Path] = field(default_factory=list)
    summaries: list[Path] = field(default_factory=list)


def discover_batch(root: str | Path) -> BatchListing:
    """Scan *root* one level deep for report and summary files.

    Raises
    ------
    ReportsDirectoryError
        If *root* does not exist or is not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise ReportsDirectoryError(f"Reports directory not found: {root}")

    listing = BatchListing(root=root)
    for subdir in root.iterdir():
        if not subdir.is_dir():
            continue
        for path in subdir.iterdir():
            if not path.is_file() or not path.name.endswith(REPORT_EXTENSION):
                continue
            if path.name == SUMMARY_FILE_NAME:
                listing.summaries.append(path)
            else:
                listing.reports.append(path)

    logger.info(
        "Discovered %d report(s) and %d summary file(s) under %s",
        len(listing.reports),
        len(listing.summaries),
        root,
    )
    return listing
