"""Resource table reader for the curator list and the check descriptions.

Resource files carry one header line.  A ``.csv`` file is comma
separated; any other extension is read as tab separated.  Read failures
are configuration errors.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from qanotify.core.errors import ConfigurationError


def delimiter_for(path: Path) -> str:
    """Comma for ``.csv`` files, tab for everything else."""
    return "," if path.suffix.lower() == ".csv" else "\t"


def read_delimited(path: str | Path, min_columns: int) -> list[list[str]]:
    """Read a headed delimited resource file into rows of stripped strings.

    Raises
    ------
    ConfigurationError
        If the file is missing, unreadable, or has too few columns.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Resource file not found: {path}")
    try:
        frame = pd.read_csv(
            path,
            sep=delimiter_for(path),
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError:
        return []
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as exc:
        raise ConfigurationError(f"Could not read {path}: {exc}") from exc

    if len(frame.columns) < min_columns:
        raise ConfigurationError(
            f"{path}: expected at least {min_columns} columns, "
            f"got {len(frame.columns)}"
        )
    return [[str(value).strip() for value in row] for row in frame.itertuples(index=False)]
