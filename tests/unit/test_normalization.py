import click

from lrm.match.alignment import DiffSegment
from lrm.utils.normalization import dedupe_preserving_order, normalize_item, split_lines
from lrm.utils.output import highlight_diff


def test_normalize_item():
    assert normalize_item("  Hello World ") == "hello world"
    assert normalize_item("  Hello World ", ignore_case=False) == "Hello World"


def test_split_lines_handles_crlf_and_blanks():
    assert split_lines("a\r\n\r\n  b  \n\n") == ["a", "b"]
    assert split_lines("") == []


def test_dedupe_keeps_first_occurrence():
    assert dedupe_preserving_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_highlight_diff_plain_text_without_color():
    segments = [DiffSegment("Jo", False), DiffSegment("h", True), DiffSegment("n", False)]
    assert click.unstyle(highlight_diff(segments)) == "John"
