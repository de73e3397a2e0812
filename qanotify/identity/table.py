"""Curator identity table.

Loads the curator list from ``resources/curators.csv`` and exposes the
lookups the routing engine and the message composer need: canonical key
to e-mail, e-mail to display name, and coordinator membership.

The curator file has a header line and four positional columns:
coordinator flag, surname, given name, e-mail.  A ``.csv`` file is comma
separated; any other extension is read as tab separated.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from qanotify.core.errors import ConfigurationError
from qanotify.normalization.author_normalizer import canonicalize
from qanotify.readers.resource_reader import read_delimited

logger = logging.getLogger(__name__)

_TRUE_FLAGS: frozenset[str] = frozenset({"true", "yes", "1"})
_COLUMN_COUNT = 4


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Identity:
    """One curator, keyed by the canonical ``"Surname,I"`` name."""

    canonical_key: str
    email: str
    is_coordinator: bool = False


# ---------------------------------------------------------------------------
# IdentityTable
# ---------------------------------------------------------------------------

class IdentityTable:
    """Read-only curator lookups, built once per run.

    When the same canonical key is listed twice the later e-mail wins.
    The reverse lookup keeps the first key listed for each e-mail.
    """

    def __init__(self) -> None:
        self._emails: dict[str, str] = {}
        self._names: dict[str, str] = {}
        self._coordinator_keys: set[str] = set()
        # dict as an insertion-ordered set
        self._coordinator_emails: dict[str, None] = {}

    @classmethod
    def from_identities(cls, identities: Iterable[Identity]) -> "IdentityTable":
        table = cls()
        for identity in identities:
            table._add(identity)
        return table

    def _add(self, identity: Identity) -> None:
        if identity.canonical_key in self._emails:
            logger.debug("Curator %s listed more than once; later entry wins", identity.canonical_key)
        self._emails[identity.canonical_key] = identity.email
        self._names.setdefault(identity.email, identity.canonical_key)
        if identity.is_coordinator:
            self._coordinator_keys.add(identity.canonical_key)
            self._coordinator_emails.setdefault(identity.email, None)

    def __len__(self) -> int:
        return len(self._emails)

    def __iter__(self) -> Iterator[str]:
        return iter(self._emails)

    @property
    def coordinator_emails(self) -> tuple[str, ...]:
        """Coordinator e-mails in curator-file order."""
        return tuple(self._coordinator_emails)

    def email_for(self, canonical_key: str) -> str | None:
        return self._emails.get(canonical_key)

    def display_name_for(self, email: str) -> str | None:
        """Return the first canonical key listed for *email*."""
        return self._names.get(email)

    def is_coordinator_key(self, canonical_key: str) -> bool:
        return canonical_key in self._coordinator_keys

    def is_coordinator_email(self, email: str) -> bool:
        return email in self._coordinator_emails


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def load_identity_table(path: str | Path) -> IdentityTable:
    """Load the curator list at *path*.

    Raises
    ------
    ConfigurationError
        If the file is missing or unreadable, or a line lacks a surname,
        given name or e-mail.
    """
    path = Path(path)
    identities: list[Identity] = []
    for row_no, row in enumerate(read_delimited(path, _COLUMN_COUNT), start=1):
        flag, surname, given, email = row[:_COLUMN_COUNT]
        if not email:
            raise ConfigurationError(f"{path} row {row_no}: missing e-mail")
        try:
            key = canonicalize(surname, given)
        except ValueError as exc:
            raise ConfigurationError(f"{path} row {row_no}: {exc}") from exc
        identities.append(
            Identity(
                canonical_key=key,
                email=email,
                is_coordinator=flag.lower() in _TRUE_FLAGS,
            )
        )

    table = IdentityTable.from_identities(identities)
    logger.info(
        "Loaded %d curator(s), %d coordinator(s) from %s",
        len(table),
        len(table.coordinator_emails),
        path,
    )
    return table
