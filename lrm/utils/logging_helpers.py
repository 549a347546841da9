"""Logging helper utilities for consistent summary reporting."""

import click


def match_rate(matched: int, len1: int, len2: int) -> float:
    """Matched pairs as a percentage of the longer list (0 when both are empty)."""
    longest = max(len1, len2)
    return matched / longest * 100 if longest > 0 else 0.0


def format_summary(
    matched: int,
    only_first: int,
    only_second: int,
    duration_seconds: float = 0.0,
    item_name: str = "items"
) -> str:
    """Format a summary line with colored counts.

    Args:
        matched: Count of matched pairs
        only_first: Count of items only in the first list
        only_second: Count of items only in the second list
        duration_seconds: Total duration in seconds
        item_name: Name of items (e.g., "items", "names")

    Returns:
        Formatted summary string with colors
    """
    parts = [
        click.style('✓', fg='green'),
        f"{item_name.capitalize()}:",
        click.style(f'{matched} matched', fg='green'),
        click.style(f'{only_first} only in first', fg='yellow'),
        click.style(f'{only_second} only in second', fg='yellow'),
    ]

    if duration_seconds > 0:
        parts.append(f"in {duration_seconds:.2f}s")

    return " ".join(parts)


__all__ = ["match_rate", "format_summary"]
