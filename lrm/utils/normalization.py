from __future__ import annotations
import re
from functools import lru_cache
from typing import Iterable, List

_line_split = re.compile(r"\r?\n")


@lru_cache(maxsize=8192)
def normalize_item(s: str, ignore_case: bool = True) -> str:
    """Comparison form of an item: trimmed, lower-cased when ``ignore_case``."""
    s = s.strip()
    if ignore_case:
        s = s.lower()
    return s


def split_lines(text: str) -> List[str]:
    """Split pasted/extracted text into trimmed, non-empty lines."""
    return [line.strip() for line in _line_split.split(text) if line.strip()]


def dedupe_preserving_order(items: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out

__all__ = ["normalize_item", "split_lines", "dedupe_preserving_order"]
