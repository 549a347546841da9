"""Matching package: similarity primitives, alignment and list reconciliation.

`reconcile` is the public entry point; the similarity functions and
strategies are exported for callers that score single pairs.
"""

from .models import (
    Algorithm,
    Binary,
    Percent,
    ScoreKind,
    MatchOptions,
    MatchPair,
    ReconciliationResult,
)
from .alignment import Alignment, AlignedCell, DiffSegment, align, simple_diff
from .reconciler import reconcile
from .strategies import get_strategy, score

__all__ = [
    "Algorithm",
    "Binary",
    "Percent",
    "ScoreKind",
    "MatchOptions",
    "MatchPair",
    "ReconciliationResult",
    "Alignment",
    "AlignedCell",
    "DiffSegment",
    "align",
    "simple_diff",
    "reconcile",
    "get_strategy",
    "score",
]
