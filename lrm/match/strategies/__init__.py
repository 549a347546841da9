"""Matching strategies, one per :class:`~lrm.match.models.Algorithm`."""

from typing import Dict, Type, Union

from .base import MatchStrategy
from .binary import ExactMatchStrategy, SoundexMatchStrategy
from .scored import (
    DamerauLevenshteinStrategy,
    JaroWinklerStrategy,
    LevenshteinStrategy,
    ScoredMatchStrategy,
    TokenSortStrategy,
)
from ..models import Algorithm, ScoreKind

_STRATEGIES: Dict[Algorithm, Type[MatchStrategy]] = {
    Algorithm.EXACT: ExactMatchStrategy,
    Algorithm.SOUNDEX: SoundexMatchStrategy,
    Algorithm.LEVENSHTEIN: LevenshteinStrategy,
    Algorithm.DAMERAU_LEVENSHTEIN: DamerauLevenshteinStrategy,
    Algorithm.JARO_WINKLER: JaroWinklerStrategy,
    Algorithm.TOKEN_SORT: TokenSortStrategy,
}


def get_strategy(algorithm: Union[Algorithm, str], ignore_case: bool = True) -> MatchStrategy:
    return _STRATEGIES[Algorithm.parse(algorithm)](ignore_case=ignore_case)


def score(algorithm: Union[Algorithm, str], a: str, b: str, ignore_case: bool = True) -> ScoreKind:
    """Score a single pair under ``algorithm`` (Binary or Percent)."""
    return get_strategy(algorithm, ignore_case).score(a, b)


__all__ = [
    "MatchStrategy",
    "ScoredMatchStrategy",
    "ExactMatchStrategy",
    "SoundexMatchStrategy",
    "LevenshteinStrategy",
    "DamerauLevenshteinStrategy",
    "JaroWinklerStrategy",
    "TokenSortStrategy",
    "get_strategy",
    "score",
]
