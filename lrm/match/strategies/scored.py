"""Similarity strategies producing a 0-100 score."""
from __future__ import annotations
from typing import Callable

from .base import MatchStrategy
from ..models import Algorithm, Percent
from ..similarity import (
    damerau_levenshtein_similarity,
    jaro_winkler_similarity,
    levenshtein_similarity,
    sort_tokens,
)


class ScoredMatchStrategy(MatchStrategy):
    is_scored = True
    similarity: Callable[[str, str], float]

    def compare(self, left: str, right: str) -> Percent:
        return Percent(self.similarity(left, right))


class LevenshteinStrategy(ScoredMatchStrategy):
    algorithm = Algorithm.LEVENSHTEIN
    similarity = staticmethod(levenshtein_similarity)


class DamerauLevenshteinStrategy(ScoredMatchStrategy):
    algorithm = Algorithm.DAMERAU_LEVENSHTEIN
    similarity = staticmethod(damerau_levenshtein_similarity)


class JaroWinklerStrategy(ScoredMatchStrategy):
    algorithm = Algorithm.JARO_WINKLER
    similarity = staticmethod(jaro_winkler_similarity)


class TokenSortStrategy(ScoredMatchStrategy):
    """Word-order independent Levenshtein.

    Tokenization always lower-cases, so ``ignore_case`` has no effect here.
    """

    algorithm = Algorithm.TOKEN_SORT
    similarity = staticmethod(levenshtein_similarity)

    def prepare(self, item: str) -> str:
        return sort_tokens(item)
