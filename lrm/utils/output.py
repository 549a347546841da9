"""Output formatting utilities for consistent CLI reporting."""

from __future__ import annotations
from pathlib import Path
from typing import Iterable

import click

from ..match.alignment import DiffSegment


def section_header(text: str) -> str:
    """Format a section header with color.

    Args:
        text: Header text

    Returns:
        Formatted header string
    """
    return click.style(f"▶ {text}", fg='cyan', bold=True)


def success(text: str, prefix: str = "✓") -> str:
    return f"{click.style(prefix, fg='green')} {text}"


def warning(text: str, prefix: str = "⚠") -> str:
    return f"{click.style(prefix, fg='yellow')} {text}"


def report_files(csv_path: Path | str, html_path: Path | str, label: str) -> str:
    """Format report file paths (CSV and HTML).

    Args:
        csv_path: Path to CSV file
        html_path: Path to HTML file
        label: Report label

    Returns:
        Formatted report files string
    """
    csv = click.style(str(Path(csv_path).resolve()), fg='yellow')
    html = click.style(str(Path(html_path).resolve()), fg='yellow')
    return f"  {click.style('•', fg='blue')} {label}:\n    CSV:  {csv}\n    HTML: {html}"


def count_badge(count: int, label: str, color: str = 'cyan') -> str:
    return f"{click.style(str(count), fg=color, bold=True)} {label}"


def highlight_diff(segments: Iterable[DiffSegment]) -> str:
    """Render diff segments for the terminal, differing runs in red."""
    return "".join(
        click.style(seg.text, fg='red', bold=True, underline=True) if seg.highlighted else seg.text
        for seg in segments
    )


def divider() -> str:
    return click.style("─" * 60, fg='bright_black')


__all__ = [
    "section_header",
    "success",
    "warning",
    "report_files",
    "count_badge",
    "highlight_diff",
    "divider",
]
