"""Tests for qanotify/identity/table.py."""
from __future__ import annotations

from pathlib import Path

import pytest

from qanotify.core.errors import ConfigurationError
from qanotify.identity.table import Identity, IdentityTable, load_identity_table


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# IdentityTable
# ---------------------------------------------------------------------------

class TestIdentityTable:
    def test_email_lookup(self, identities: IdentityTable) -> None:
        assert identities.email_for("Smith,B") == "b.smith@example.org"
        assert identities.email_for("Nobody,X") is None

    def test_coordinator_membership(self, identities: IdentityTable) -> None:
        assert identities.coordinator_emails == ("a.jones@example.org",)
        assert identities.is_coordinator_key("Jones,A")
        assert identities.is_coordinator_email("a.jones@example.org")
        assert not identities.is_coordinator_key("Smith,B")
        assert not identities.is_coordinator_email("b.smith@example.org")

    def test_reverse_lookup_keeps_first_name(self) -> None:
        table = IdentityTable.from_identities([
            Identity("Smith,B", "shared@example.org"),
            Identity("Smyth,B", "shared@example.org"),
        ])
        assert table.display_name_for("shared@example.org") == "Smith,B"

    def test_duplicate_key_later_email_wins(self) -> None:
        table = IdentityTable.from_identities([
            Identity("Smith,B", "old@example.org"),
            Identity("Smith,B", "new@example.org"),
        ])
        assert table.email_for("Smith,B") == "new@example.org"
        assert len(table) == 1

    def test_coordinator_emails_in_input_order(self) -> None:
        table = IdentityTable.from_identities([
            Identity("Zed,Z", "z@example.org", is_coordinator=True),
            Identity("Abe,A", "a@example.org", is_coordinator=True),
        ])
        assert table.coordinator_emails == ("z@example.org", "a@example.org")


# ---------------------------------------------------------------------------
# load_identity_table
# ---------------------------------------------------------------------------

class TestLoadIdentityTable:
    def test_loads_comma_separated_csv(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "curators.csv",
            "Coordinator,Surname,First Name,Email\n"
            "true,Jones,Alice,a.jones@example.org\n"
            "false,O'Brien,James,j.obrien@example.org\n",
        )
        table = load_identity_table(path)
        assert table.email_for("Jones,A") == "a.jones@example.org"
        assert table.email_for("OBrien,J") == "j.obrien@example.org"
        assert table.coordinator_emails == ("a.jones@example.org",)

    def test_other_extension_is_tab_separated(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "curators.tsv",
            "Coordinator\tSurname\tFirst Name\tEmail\n"
            "TRUE\tJones\tAlice\ta.jones@example.org\n",
        )
        table = load_identity_table(path)
        assert table.is_coordinator_key("Jones,A")

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_identity_table(tmp_path / "curators.csv")

    def test_missing_email_raises(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "curators.csv",
            "Coordinator,Surname,First Name,Email\n"
            "false,Smith,Bob,\n",
        )
        with pytest.raises(ConfigurationError, match="missing e-mail"):
            load_identity_table(path)

    def test_missing_given_name_raises(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "curators.csv",
            "Coordinator,Surname,First Name,Email\n"
            "false,Smith,,b.smith@example.org\n",
        )
        with pytest.raises(ConfigurationError):
            load_identity_table(path)

    def test_too_few_columns_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "curators.csv", "Surname,Email\nSmith,b@example.org\n")
        with pytest.raises(ConfigurationError, match="columns"):
            load_identity_table(path)
