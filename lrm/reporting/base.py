"""Base utilities for report generation."""

import csv
from pathlib import Path
from typing import Any, Iterable

from .html_templates import get_html_template


def write_csv_report(
    csv_path: Path,
    headers: list[str],
    rows: Iterable[list[Any]]
) -> None:
    """Write CSV report with given headers and rows.

    Args:
        csv_path: Path to output CSV file
        headers: List of column headers
        rows: Iterable of row data (each row is a list matching headers)
    """
    with csv_path.open('w', newline='', encoding='utf-8') as fh:
        writer = csv.writer(fh)
        writer.writerow(headers)
        writer.writerows(rows)


def write_html_report(
    html_path: Path,
    title: str,
    columns: list[str],
    rows: list[list[Any]],
    description: str = "",
    default_order: list[list[Any]] | None = None,
    active_page: str | None = None
) -> None:
    """Write HTML report using standard template.

    Args:
        html_path: Path to output HTML file
        title: Report title
        columns: List of column names
        rows: List of row data (already HTML-safe)
        description: Optional description text
        default_order: DataTables default sort order (e.g., [[0, "asc"]])
        active_page: Navigation entry to highlight
    """
    html_content = get_html_template(
        title=title,
        columns=columns,
        rows=rows,
        description=description,
        default_order=default_order,
        csv_filename=html_path.with_suffix('.csv').name,
        active_page=active_page
    )
    html_path.write_text(html_content, encoding='utf-8')


def format_similarity(value: float | None) -> str:
    """Format a 0-100 similarity with two decimals (empty for binary matches)."""
    return f"{value:.2f}" if value is not None else ""
