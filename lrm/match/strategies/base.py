"""Base class for matching strategies."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

from ..models import Algorithm, ScoreKind
from ...utils.normalization import normalize_item


class MatchStrategy(ABC):
    """Base class for all matching strategies.

    A strategy turns an item into its comparison form once (``prepare``) and
    compares two prepared forms (``compare``). Binary strategies answer with
    :class:`Binary`, scored strategies with :class:`Percent`.
    """

    algorithm: Algorithm
    is_scored: bool = False

    def __init__(self, ignore_case: bool = True):
        self.ignore_case = ignore_case

    def prepare(self, item: str) -> Any:
        return normalize_item(item, self.ignore_case)

    @abstractmethod
    def compare(self, left: Any, right: Any) -> ScoreKind:
        """Compare two values previously returned by ``prepare``."""

    def score(self, a: str, b: str) -> ScoreKind:
        return self.compare(self.prepare(a), self.prepare(b))

    def get_name(self) -> str:
        """Return the strategy name for logging."""
        return self.algorithm.value
