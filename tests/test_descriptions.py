"""Tests for qanotify/catalog/descriptions.py."""
from __future__ import annotations

from pathlib import Path

import pytest

from qanotify.catalog.descriptions import CheckCatalog, Priority, load_check_catalog
from qanotify.core.errors import ConfigurationError


class TestPriority:
    def test_parse_is_case_insensitive(self) -> None:
        assert Priority.parse("blocker") is Priority.BLOCKER
        assert Priority.parse(" High ") is Priority.HIGH

    def test_empty_is_medium(self) -> None:
        assert Priority.parse("") is Priority.MEDIUM
        assert Priority.parse(None) is Priority.MEDIUM

    def test_unknown_raises(self) -> None:
        with pytest.raises(ValueError):
            Priority.parse("Urgent")


class TestLoadCheckCatalog:
    def test_loads_priorities_and_descriptions(self, tmp_path: Path) -> None:
        path = tmp_path / "descriptions.tsv"
        path.write_text(
            "Display Name\tPriority\tDescription\n"
            "Missing_Refs\tBlocker\tEvents without <i>literature</i>.\n"
            "Orphans\t\tUnreferenced instances.\n",
            encoding="utf-8",
        )
        catalog = load_check_catalog(path)

        assert len(catalog) == 2
        assert catalog.priority_for("Missing_Refs") is Priority.BLOCKER
        assert catalog.description_for("Missing_Refs") == "Events without <i>literature</i>."
        assert catalog.priority_for("Orphans") is Priority.MEDIUM
        assert catalog.priority_for("Unknown") is None

    def test_none_path_gives_empty_catalog(self) -> None:
        catalog = load_check_catalog(None)
        assert isinstance(catalog, CheckCatalog)
        assert len(catalog) == 0

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_check_catalog(tmp_path / "descriptions.tsv")

    def test_unknown_priority_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "descriptions.tsv"
        path.write_text(
            "Display Name\tPriority\tDescription\nMissing_Refs\tUrgent\tx\n",
            encoding="utf-8",
        )
        with pytest.raises(ConfigurationError, match="Urgent"):
            load_check_catalog(path)
