"""Tests for qanotify/readers/tsv_reader.py and qanotify/readers/base.py."""
from __future__ import annotations

from pathlib import Path

from qanotify.readers.base import Headers, Report, Row
from qanotify.readers.tsv_reader import SummaryLine, read_report, read_summary


# ---------------------------------------------------------------------------
# read_report
# ---------------------------------------------------------------------------

class TestReadReport:
    def test_headers_and_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "issues.tsv"
        path.write_text("DB_ID\tName\n1\tfoo\n2\tbar\n", encoding="utf-8")
        report = read_report(path)

        assert report.headers.labels == ("DB_ID", "Name")
        assert [row.cells for row in report.rows] == [("1", "foo"), ("2", "bar")]

    def test_blank_lines_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "issues.tsv"
        path.write_text("DB_ID\tName\n\n1\tfoo\n\n", encoding="utf-8")
        assert len(read_report(path).rows) == 1

    def test_ragged_rows_kept(self, tmp_path: Path) -> None:
        path = tmp_path / "issues.tsv"
        path.write_text("DB_ID\tName\tAuthor\n1\n2\tbar\tSmith, B\textra\n", encoding="utf-8")
        rows = read_report(path).rows
        assert rows[0].cells == ("1",)
        assert rows[1].cells == ("2", "bar", "Smith, B", "extra")

    def test_quotes_are_literal(self, tmp_path: Path) -> None:
        path = tmp_path / "issues.tsv"
        path.write_text('Name\n"quoted"\n', encoding="utf-8")
        assert read_report(path).rows[0].cells == ('"quoted"',)

    def test_latin1_bytes_replaced(self, tmp_path: Path) -> None:
        path = tmp_path / "issues.tsv"
        path.write_bytes("DB_ID\tMostRecentAuthor\n1\tMüller, K\n".encode("latin-1"))
        rows = read_report(path).rows

        assert len(rows) == 1
        assert rows[0].cells == ("1", "M�ller, K")

    def test_very_long_cell(self, tmp_path: Path) -> None:
        path = tmp_path / "issues.tsv"
        long_value = "x" * 200_000
        path.write_text(f"DB_ID\tName\n1\t{long_value}\n", encoding="utf-8")
        assert read_report(path).rows[0].cells == ("1", long_value)

    def test_crlf_line_endings(self, tmp_path: Path) -> None:
        path = tmp_path / "issues.tsv"
        path.write_bytes(b"DB_ID\tName\r\n1\tfoo\r\n")
        report = read_report(path)
        assert report.headers.labels == ("DB_ID", "Name")
        assert report.rows[0].cells == ("1", "foo")

    def test_header_only(self, tmp_path: Path) -> None:
        path = tmp_path / "issues.tsv"
        path.write_text("DB_ID\tName\n", encoding="utf-8")
        report = read_report(path)
        assert report.rows == ()
        assert len(report.headers) == 2

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "issues.tsv"
        path.write_text("", encoding="utf-8")
        report = read_report(path)
        assert report.headers.labels == ()
        assert report.rows == ()


# ---------------------------------------------------------------------------
# Report naming
# ---------------------------------------------------------------------------

class TestReportNaming:
    def _report(self, name: str) -> Report:
        return Report(path=Path("78") / "checks" / name, headers=Headers(), rows=())

    def test_plain_report(self) -> None:
        report = self._report("Missing_Literature_References.tsv")
        assert report.display_name == "Missing_Literature_References"
        assert report.title == "Missing Literature References"
        assert report.stem == "Missing_Literature_References"
        assert not report.is_diff
        assert report.batch == "checks"

    def test_diff_report(self) -> None:
        report = self._report("Missing_Literature_References_diff.tsv")
        assert report.display_name == "Missing_Literature_References"
        assert report.title == "Missing Literature References"
        assert report.stem == "Missing_Literature_References_diff"
        assert report.is_diff


class TestHeadersAndRow:
    def test_index_ending_with_prefers_first_variant(self) -> None:
        headers = Headers(("DBID", "Reaction_DB_ID"))
        assert headers.index_ending_with(("DB_ID", "DBID")) == 1

    def test_index_ending_with_falls_back(self) -> None:
        headers = Headers(("Name", "InstanceDBID"))
        assert headers.index_ending_with(("DB_ID", "DBID")) == 1

    def test_index_ending_with_none(self) -> None:
        assert Headers(("Name",)).index_ending_with(("DB_ID", "DBID")) is None

    def test_row_get_out_of_range(self) -> None:
        row = Row(("a",))
        assert row.get(0) == "a"
        assert row.get(3) is None
        assert row.get(None) is None


# ---------------------------------------------------------------------------
# read_summary
# ---------------------------------------------------------------------------

class TestReadSummary:
    def test_two_and_three_column_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "summary.tsv"
        path.write_text(
            "Report\tCount\tPriority\nCheck A\t3\nCheck B\t7\tHigh\n",
            encoding="utf-8",
        )
        assert read_summary(path) == [
            SummaryLine("Check A", 3),
            SummaryLine("Check B", 7, "High"),
        ]

    def test_malformed_lines_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "summary.tsv"
        path.write_text(
            "Report\tCount\nCheck A\tmany\nCheck B\nCheck C\t2\n",
            encoding="utf-8",
        )
        assert read_summary(path) == [SummaryLine("Check C", 2)]
