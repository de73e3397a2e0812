"""Author name normalizer.

Reduces a person name to the canonical ``"Surname,I"`` key used to match
report authors against the curator list.

Rules applied in order
----------------------
1. Remove every non-word character (ASCII ``\\W``) from the surname.
   Case is preserved: ``O'Brien`` becomes ``OBrien``.
2. Keep only the first character of the given name or initial.
3. Join with a comma.

Distinct people sharing a surname and initial collide on the same key;
the curator list is expected to disambiguate them by surname spelling.
"""
from __future__ import annotations

import re

_NON_WORD_RE = re.compile(r"\W", re.ASCII)

# Report author cells look like "Surname, Given[, modification date]".
_AUTHOR_FIELD_SPLIT_RE = re.compile(r", *")


def canonicalize(surname: str, given: str) -> str:
    """Return the canonical ``"Surname,I"`` key for a surname and given name.

    Raises
    ------
    ValueError
        If the given name is empty, or the surname has no word characters.
    """
    last = _NON_WORD_RE.sub("", surname)
    given = given.strip()
    if not last:
        raise ValueError(f"surname {surname!r} has no word characters")
    if not given:
        raise ValueError(f"empty given name for surname {surname!r}")
    return f"{last},{given[0]}"


def parse_author_token(token: str) -> str | None:
    """Return the canonical key for a report author cell, or ``None``.

    The cell must carry at least a surname and a given name separated by a
    comma; any trailing comma-separated fields are ignored.  Tokens that
    cannot be resolved return ``None``.
    """
    fields = _AUTHOR_FIELD_SPLIT_RE.split(token.strip())
    if len(fields) < 2:
        return None
    try:
        return canonicalize(fields[0], fields[1])
    except ValueError:
        return None
