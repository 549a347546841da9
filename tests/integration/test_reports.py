"""Tests for CSV/HTML comparison reports."""

import csv

from lrm.match import MatchOptions, reconcile
from lrm.reporting import write_comparison_reports


def _read_csv(path):
    with path.open(newline="", encoding="utf-8") as fh:
        return list(csv.reader(fh))


def test_reports_written(tmp_path):
    result = reconcile(["Jon", "<b>Zed</b>"], ["Alpha", "John"], MatchOptions(algorithm="levenshtein", threshold=70))
    out_dir = tmp_path / "nested" / "reports"

    reports = write_comparison_reports(result, out_dir)

    assert set(reports) == {"matches", "only_in_first", "only_in_second"}
    for csv_path, html_path in reports.values():
        assert csv_path.exists()
        assert html_path.exists()

    rows = _read_csv(out_dir / "matches.csv")
    assert rows[0] == ["Row (First)", "Item (First)", "Row (Second)", "Item (Second)", "Algorithm", "Similarity"]
    assert rows[1] == ["1", "Jon", "2", "John", "levenshtein", "75.00"]

    assert _read_csv(out_dir / "only_in_first.csv") == [["Row", "Item"], ["2", "<b>Zed</b>"]]
    assert _read_csv(out_dir / "only_in_second.csv") == [["Row", "Item"], ["1", "Alpha"]]


def test_html_escapes_and_highlights(tmp_path):
    result = reconcile(["a<b"], ["a<c", "<script>"], MatchOptions(algorithm="levenshtein", threshold=50))
    write_comparison_reports(result, tmp_path)

    matches_html = (tmp_path / "matches.html").read_text(encoding="utf-8")
    assert 'a&lt;<span class="diff-highlight">b</span>' in matches_html
    assert 'a&lt;<span class="diff-highlight">c</span>' in matches_html
    assert "DataTable" in matches_html
    assert 'href="matches.csv"' in matches_html
    assert '<a href="matches.html" class="active">' in matches_html

    leftovers_html = (tmp_path / "only_in_second.html").read_text(encoding="utf-8")
    assert "&lt;script&gt;" in leftovers_html
    assert "<td><script>" not in leftovers_html


def test_binary_matches_have_empty_similarity(tmp_path):
    result = reconcile(["x"], ["X"])
    write_comparison_reports(result, tmp_path)
    rows = _read_csv(tmp_path / "matches.csv")
    assert rows[1] == ["1", "x", "1", "X", "exact", ""]


def test_empty_result(tmp_path):
    result = reconcile([], [])
    write_comparison_reports(result, tmp_path)
    assert _read_csv(tmp_path / "matches.csv") == [["Row (First)", "Item (First)", "Row (Second)", "Item (Second)", "Algorithm", "Similarity"]]
