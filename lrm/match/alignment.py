"""Character-level alignment used to explain why two items matched.

The alignment is a longest-common-subsequence walk over both strings. It is
annotation only: nothing in here influences whether two items match.
"""

from __future__ import annotations
from dataclasses import dataclass
from html import escape
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class AlignedCell:
    """One aligned position; ``char == ""`` marks a gap on this side."""
    char: str
    matched: bool

    @property
    def is_gap(self) -> bool:
        return self.char == ""


@dataclass(frozen=True)
class DiffSegment:
    text: str
    highlighted: bool


@dataclass(frozen=True)
class Alignment:
    first: Tuple[AlignedCell, ...]
    second: Tuple[AlignedCell, ...]

    def segments(self) -> Tuple[List[DiffSegment], List[DiffSegment]]:
        return render_segments(self.first), render_segments(self.second)

    def to_html(self) -> Tuple[str, str]:
        return render_html(self.first), render_html(self.second)


def _lcs_table(a: str, b: str) -> List[List[int]]:
    len1, len2 = len(a), len(b)
    dp = [[0] * (len2 + 1) for _ in range(len1 + 1)]
    for i in range(1, len1 + 1):
        for j in range(1, len2 + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
    return dp


def align(a: str, b: str) -> Alignment:
    """Align ``a`` and ``b`` along their longest common subsequence.

    Backtracking starts at the bottom-right corner. When stepping left and
    stepping up are equally good the second string is consumed first; the
    output depends on that order, so keep it.
    """
    dp = _lcs_table(a, b)
    i, j = len(a), len(b)
    first: List[AlignedCell] = []
    second: List[AlignedCell] = []

    while i > 0 or j > 0:
        if i > 0 and j > 0 and a[i - 1] == b[j - 1]:
            first.append(AlignedCell(a[i - 1], True))
            second.append(AlignedCell(b[j - 1], True))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or dp[i][j - 1] >= dp[i - 1][j]):
            first.append(AlignedCell("", False))
            second.append(AlignedCell(b[j - 1], False))
            j -= 1
        else:
            first.append(AlignedCell(a[i - 1], False))
            second.append(AlignedCell("", False))
            i -= 1

    first.reverse()
    second.reverse()
    return Alignment(first=tuple(first), second=tuple(second))


def render_segments(cells: Sequence[AlignedCell]) -> List[DiffSegment]:
    """Collapse cells into alternating plain/highlighted runs.

    Unmatched characters form highlighted runs. Gaps add nothing visible but
    close an open highlighted run.
    """
    segments: List[DiffSegment] = []
    buf: List[str] = []
    in_diff = False
    for cell in cells:
        if cell.is_gap:
            if buf and in_diff:
                segments.append(DiffSegment("".join(buf), True))
                buf = []
            in_diff = False
            continue
        highlighted = not cell.matched
        if buf and highlighted != in_diff:
            segments.append(DiffSegment("".join(buf), in_diff))
            buf = []
        in_diff = highlighted
        buf.append(cell.char)
    if buf:
        segments.append(DiffSegment("".join(buf), in_diff))
    return segments


def render_html(cells: Sequence[AlignedCell], css_class: str = "diff-highlight") -> str:
    parts = []
    for seg in render_segments(cells):
        text = escape(seg.text)
        if seg.highlighted:
            parts.append(f'<span class="{css_class}">{text}</span>')
        else:
            parts.append(text)
    return "".join(parts)


def simple_diff(a: str, b: str) -> Alignment:
    """Position-by-position comparison, cheaper than :func:`align`.

    Characters at the same index are matched when equal; the longer string's
    tail is unmatched against gaps.
    """
    first: List[AlignedCell] = []
    second: List[AlignedCell] = []
    for idx in range(max(len(a), len(b))):
        c1 = a[idx] if idx < len(a) else ""
        c2 = b[idx] if idx < len(b) else ""
        same = c1 == c2
        first.append(AlignedCell(c1, same))
        second.append(AlignedCell(c2, same))
    return Alignment(first=tuple(first), second=tuple(second))


__all__ = [
    "AlignedCell",
    "DiffSegment",
    "Alignment",
    "align",
    "simple_diff",
    "render_segments",
    "render_html",
]
