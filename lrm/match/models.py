from __future__ import annotations
"""Value types shared by the matching engine.

Everything here is created fresh for one reconciliation call and is never
mutated afterwards (results are assembled once, then handed to the caller).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..errors import ConfigurationError
from .alignment import Alignment

# --- Algorithm Enum --------------------------------------------------------

class Algorithm(str, Enum):
    EXACT = "exact"
    SOUNDEX = "soundex"
    LEVENSHTEIN = "levenshtein"
    DAMERAU_LEVENSHTEIN = "damerau-levenshtein"
    JARO_WINKLER = "jaro-winkler"
    TOKEN_SORT = "token-sort"

    @property
    def is_scored(self) -> bool:
        """True when the algorithm yields a 0-100 similarity checked against a threshold."""
        return self not in _BINARY_ALGORITHMS

    @classmethod
    def parse(cls, value: Union[str, "Algorithm"]) -> "Algorithm":
        """Resolve a tag such as ``"jaro-winkler"`` or ``"JARO_WINKLER"``.

        Raises:
            ConfigurationError: if the tag names no known algorithm
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ConfigurationError(f"Algorithm must be a string, got {type(value).__name__}")
        key = value.strip().lower().replace("_", "-")
        for algo in cls:
            if algo.value == key:
                return algo
        choices = ", ".join(a.value for a in cls)
        raise ConfigurationError(f"Unknown algorithm '{value}'. Available: {choices}")


_BINARY_ALGORITHMS = frozenset({Algorithm.EXACT, Algorithm.SOUNDEX})

# --- Score kinds -----------------------------------------------------------

@dataclass(frozen=True)
class Binary:
    matched: bool


@dataclass(frozen=True)
class Percent:
    value: float


ScoreKind = Union[Binary, Percent]

# --- Options ---------------------------------------------------------------

@dataclass(frozen=True)
class MatchOptions:
    """How two lists should be compared.

    ``threshold`` is only consulted for scored algorithms but is validated
    regardless so a bad value never hides behind a binary algorithm.
    """
    algorithm: Algorithm = Algorithm.EXACT
    ignore_case: bool = True
    threshold: float = 80.0

    def __post_init__(self):
        object.__setattr__(self, "algorithm", Algorithm.parse(self.algorithm))
        threshold = self.threshold
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise ConfigurationError(f"Threshold must be a number, got {threshold!r}")
        if not 0 <= threshold <= 100:
            raise ConfigurationError(f"Threshold must be between 0 and 100, got {threshold}")
        object.__setattr__(self, "threshold", float(threshold))
        object.__setattr__(self, "ignore_case", bool(self.ignore_case))

# --- Results ---------------------------------------------------------------

@dataclass(frozen=True)
class MatchPair:
    item1: str
    item2: str
    index1: int
    index2: int
    algorithm: Algorithm
    similarity: Optional[float] = None
    alignment: Optional[Alignment] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "item1": self.item1,
            "item2": self.item2,
            "index1": self.index1,
            "index2": self.index2,
            "algorithm": self.algorithm.value,
        }
        if self.similarity is not None:
            data["similarity"] = round(self.similarity, 2)
        return data


@dataclass
class ReconciliationResult:
    """Partition of two lists into matched pairs and per-side leftovers.

    The ``*_indices`` lists run parallel to ``only_in_first`` /
    ``only_in_second`` and hold the original positions, which keeps the
    partition checkable when a list contains duplicate values.
    """
    matches: List[MatchPair] = field(default_factory=list)
    only_in_first: List[str] = field(default_factory=list)
    only_in_second: List[str] = field(default_factory=list)
    only_in_first_indices: List[int] = field(default_factory=list)
    only_in_second_indices: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matches": [m.to_dict() for m in self.matches],
            "only_in_first": list(self.only_in_first),
            "only_in_second": list(self.only_in_second),
        }


__all__ = [
    "Algorithm",
    "Binary",
    "Percent",
    "ScoreKind",
    "MatchOptions",
    "MatchPair",
    "ReconciliationResult",
]
