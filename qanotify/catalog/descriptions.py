"""QA check descriptions and priorities.

Loaded from ``resources/descriptions.tsv`` with columns Display Name,
Priority and Description.  *Display Name* matches the report file's
display name, e.g. ``Missing_Literature_References``.

Priorities
----------
Blocker : must be fixed in time for the final slice, otherwise something
          in the release process breaks.
High    : expected to be fixed in time for the final slice, though nothing
          breaks if it is not.
Medium  : should be looked into as time allows.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from qanotify.core.errors import ConfigurationError
from qanotify.readers.resource_reader import read_delimited

logger = logging.getLogger(__name__)


class Priority(str, Enum):
    BLOCKER = "Blocker"
    HIGH = "High"
    MEDIUM = "Medium"

    @classmethod
    def parse(cls, label: str | None) -> "Priority":
        """Return the priority named by *label*; empty means ``MEDIUM``.

        Raises ``ValueError`` for an unrecognized label.
        """
        if not label or not label.strip():
            return cls.MEDIUM
        wanted = label.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValueError(f"unknown priority {label!r}")


DEFAULT_PRIORITY = Priority.MEDIUM


@dataclass(frozen=True)
class CheckInfo:
    priority: Priority = DEFAULT_PRIORITY
    description: str | None = None


@dataclass
class CheckCatalog:
    """Display name to ``CheckInfo`` lookup.  An empty catalog is valid."""

    checks: dict[str, CheckInfo] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.checks)

    def __contains__(self, display_name: object) -> bool:
        return display_name in self.checks

    def get(self, display_name: str) -> CheckInfo | None:
        return self.checks.get(display_name)

    def priority_for(self, display_name: str) -> Priority | None:
        info = self.checks.get(display_name)
        return info.priority if info else None

    def description_for(self, display_name: str) -> str | None:
        info = self.checks.get(display_name)
        return info.description if info else None


def load_check_catalog(path: str | Path | None) -> CheckCatalog:
    """Load the description table at *path*.

    ``None`` means the batch carries no priority table and yields an empty
    catalog.

    Raises
    ------
    ConfigurationError
        If a configured file is missing or unreadable, or a priority label
        is not one of Blocker, High, Medium.
    """
    if path is None:
        logger.info("No check description table configured")
        return CheckCatalog()

    path = Path(path)
    catalog = CheckCatalog()
    for row_no, row in enumerate(read_delimited(path, 2), start=1):
        display_name = row[0]
        if not display_name:
            continue
        try:
            priority = Priority.parse(row[1])
        except ValueError as exc:
            raise ConfigurationError(f"{path} row {row_no}: {exc}") from exc
        description = row[2] if len(row) > 2 and row[2] else None
        catalog.checks[display_name] = CheckInfo(priority=priority, description=description)

    logger.info("Loaded %d check description(s) from %s", len(catalog), path)
    return catalog
