"""Author resolver.

Finds the last-modifier columns of a report once, then extracts the
canonical author keys of each row from those columns.
"""
from __future__ import annotations

import logging
import re

from qanotify.core.constants import AUTHOR_HEADERS
from qanotify.normalization.author_normalizer import parse_author_token
from qanotify.readers.base import Headers, Row

logger = logging.getLogger(__name__)

_INDEXED_AUTHOR_RE = re.compile(
    r"^(?:" + "|".join(re.escape(label) for label in AUTHOR_HEADERS) + r")_\d+$"
)


def is_author_label(label: str) -> bool:
    """True for an author column label, including suffixed and indexed variants."""
    label = label.strip()
    if any(label.endswith(variant) for variant in AUTHOR_HEADERS):
        return True
    return bool(_INDEXED_AUTHOR_RE.match(label))


class AuthorResolver:
    """Extract canonical author keys from the rows of one report."""

    def __init__(self, headers: Headers) -> None:
        self.indexes = headers.indexes_where(is_author_label)
        if not self.indexes:
            logger.debug("No author column among headers %r", headers.labels)

    def resolve(self, row: Row) -> tuple[str, ...]:
        """Return the distinct canonical keys authored on *row*, in column order.

        Empty cells, cells beyond the end of a short row and tokens without
        a given name are skipped.
        """
        keys: dict[str, None] = {}
        for index in self.indexes:
            token = row.get(index)
            if not token or not token.strip():
                continue
            key = parse_author_token(token)
            if key is None:
                logger.debug("Unresolvable author token %r", token)
                continue
            keys.setdefault(key, None)
        return tuple(keys)
