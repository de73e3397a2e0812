"""Immutable report values shared by the readers and the routing engine.

Field contract
--------------
Headers.labels : ordered header row of the report
Row.cells      : ordered cells of one data row; may be shorter or longer
                 than the header row (ragged rows are kept as read)
Report.path    : path of the ``.tsv`` file the report was read from
Report.rows    : data rows in file order
"""
from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from qanotify.core.constants import DIFF_SUFFIX

_DISPLAY_NAME_SPLIT_RE = re.compile(rf"(?:{DIFF_SUFFIX})?\.")


@dataclass(frozen=True)
class Headers:
    """Ordered header row with label lookups resolved once per report."""

    labels: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def index_ending_with(self, variants: tuple[str, ...]) -> int | None:
        """Return the first position whose label ends with a variant.

        Variants are tried in order; each one is checked against every
        label before the next variant is considered.  Returns ``None`` when
        no label matches.
        """
        for variant in variants:
            for index, label in enumerate(self.labels):
                if label.endswith(variant):
                    return index
        return None

    def indexes_where(self, predicate: Callable[[str], bool]) -> tuple[int, ...]:
        """Return every position whose label satisfies *predicate*, in header order."""
        return tuple(
            index for index, label in enumerate(self.labels) if predicate(label)
        )


@dataclass(frozen=True)
class Row:
    """One data row viewed through its report's ``Headers``."""

    cells: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[str]:
        return iter(self.cells)

    def get(self, index: int | None) -> str | None:
        """Return the cell at *index*, or ``None`` when absent or out of range."""
        if index is None or index < 0 or index >= len(self.cells):
            return None
        return self.cells[index]


@dataclass(frozen=True)
class Report:
    """A parsed QA report."""

    path: Path
    headers: Headers
    rows: tuple[Row, ...]

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        """File name before the first dot."""
        return self.name.split(".")[0]

    @property
    def display_name(self) -> str:
        """File name before the first ``_diff.`` or ``.``; the description lookup key."""
        return _DISPLAY_NAME_SPLIT_RE.split(self.name)[0]

    @property
    def title(self) -> str:
        return self.display_name.replace("_", " ")

    @property
    def is_diff(self) -> bool:
        """True when the report holds only issues new since the prior run."""
        return self.stem.endswith(DIFF_SUFFIX)

    @property
    def batch(self) -> str:
        """Name of the sub-directory holding the report."""
        return self.path.parent.name
