"""Write reconciliation results as CSV + HTML reports."""
from __future__ import annotations
import logging
from html import escape
from pathlib import Path
from typing import Dict, Sequence, Tuple

from ..match.models import MatchPair, ReconciliationResult
from .base import format_similarity, write_csv_report, write_html_report

logger = logging.getLogger(__name__)


def _diff_cells(pair: MatchPair) -> Tuple[str, str]:
    if pair.alignment is None:
        return escape(pair.item1), escape(pair.item2)
    return pair.alignment.to_html()


def write_matches_report(result: ReconciliationResult, out_dir: Path) -> tuple[Path, Path]:
    """Write matched pairs; the HTML variant highlights differing characters."""
    headers = ["Row (First)", "Item (First)", "Row (Second)", "Item (Second)", "Algorithm", "Similarity"]

    csv_path = out_dir / "matches.csv"
    write_csv_report(csv_path, headers, (
        [m.index1 + 1, m.item1, m.index2 + 1, m.item2, m.algorithm.value, format_similarity(m.similarity)]
        for m in result.matches
    ))

    html_rows = []
    for m in result.matches:
        diff1, diff2 = _diff_cells(m)
        html_rows.append([m.index1 + 1, diff1, m.index2 + 1, diff2, m.algorithm.value, format_similarity(m.similarity)])

    html_path = out_dir / "matches.html"
    write_html_report(
        html_path,
        title="Matches",
        columns=headers,
        rows=html_rows,
        description=f"{len(result.matches)} matched pairs. Highlighted characters differ between the two items.",
        default_order=[[0, "asc"]],
        active_page="matches",
    )
    return csv_path, html_path


def _write_leftovers(
    out_dir: Path,
    name: str,
    title: str,
    items: Sequence[str],
    indices: Sequence[int],
) -> tuple[Path, Path]:
    headers = ["Row", "Item"]
    csv_path = out_dir / f"{name}.csv"
    write_csv_report(csv_path, headers, ([idx + 1, item] for idx, item in zip(indices, items)))

    html_path = out_dir / f"{name}.html"
    write_html_report(
        html_path,
        title=title,
        columns=headers,
        rows=[[idx + 1, escape(item)] for idx, item in zip(indices, items)],
        description=f"{len(items)} items without a counterpart.",
        active_page=name,
    )
    return csv_path, html_path


def write_comparison_reports(result: ReconciliationResult, out_dir: Path) -> Dict[str, tuple[Path, Path]]:
    """Write all comparison reports into ``out_dir``.

    Returns:
        Dict with keys 'matches', 'only_in_first', 'only_in_second'
        pointing to (csv_path, html_path) tuples
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    reports = {
        "matches": write_matches_report(result, out_dir),
        "only_in_first": _write_leftovers(
            out_dir, "only_in_first", "Only in First List",
            result.only_in_first, result.only_in_first_indices,
        ),
        "only_in_second": _write_leftovers(
            out_dir, "only_in_second", "Only in Second List",
            result.only_in_second, result.only_in_second_indices,
        ),
    }
    logger.debug(f"Wrote {len(reports)} reports to {out_dir}")
    return reports


__all__ = ["write_matches_report", "write_comparison_reports"]
