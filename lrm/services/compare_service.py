"""Compare service: run reconciliation and summarize the outcome.

This service wraps the matching engine with timing, match-rate statistics
and logging. It also implements the "try every algorithm" comparison used to
pick a suitable algorithm for a pair of lists.
"""

from __future__ import annotations
import time
import logging
from dataclasses import dataclass
from typing import List, Sequence

from ..errors import ConfigurationError
from ..match import Algorithm, MatchOptions, ReconciliationResult, reconcile
from ..utils.logging_helpers import format_summary, match_rate

logger = logging.getLogger(__name__)


class ComparisonResult:
    """Results from a compare operation."""

    def __init__(self, options: MatchOptions, reconciliation: ReconciliationResult, len1: int, len2: int):
        self.options = options
        self.reconciliation = reconciliation
        self.len1 = len1
        self.len2 = len2
        self.duration_seconds = 0.0

    @property
    def matched(self) -> int:
        return len(self.reconciliation.matches)

    @property
    def match_rate(self) -> float:
        return match_rate(self.matched, self.len1, self.len2)


@dataclass(frozen=True)
class AlgorithmRate:
    algorithm: Algorithm
    matched: int
    match_rate: float


def _ensure_not_both_empty(list1: Sequence[str], list2: Sequence[str]) -> None:
    if not list1 and not list2:
        raise ConfigurationError("Both lists are empty")


def run_comparison(list1: Sequence[str], list2: Sequence[str], options: MatchOptions) -> ComparisonResult:
    """Reconcile two lists and log a summary.

    Args:
        list1: First list of items
        list2: Second list of items
        options: Validated MatchOptions

    Returns:
        ComparisonResult with the reconciliation and statistics

    Raises:
        ConfigurationError: If both lists are empty
    """
    _ensure_not_both_empty(list1, list2)
    start = time.time()

    reconciliation = reconcile(list1, list2, options)

    result = ComparisonResult(options, reconciliation, len(list1), len(list2))
    result.duration_seconds = time.time() - start

    logger.info(
        f"✓ Matched {result.matched}/{max(len(list1), len(list2))} items "
        f"({result.match_rate:.1f}%) using {options.algorithm.value} in {result.duration_seconds:.2f}s"
    )
    logger.debug(format_summary(
        result.matched,
        len(reconciliation.only_in_first),
        len(reconciliation.only_in_second),
        duration_seconds=result.duration_seconds,
    ))
    return result


def compare_all_algorithms(
    list1: Sequence[str],
    list2: Sequence[str],
    ignore_case: bool = True,
    threshold: float = 80.0,
) -> List[AlgorithmRate]:
    """Reconcile once per algorithm and report each one's match rate.

    Returns:
        One AlgorithmRate per Algorithm, in enum order

    Raises:
        ConfigurationError: If both lists are empty or threshold is invalid
    """
    _ensure_not_both_empty(list1, list2)
    rates: List[AlgorithmRate] = []
    for algorithm in Algorithm:
        options = MatchOptions(algorithm=algorithm, ignore_case=ignore_case, threshold=threshold)
        matched = len(reconcile(list1, list2, options).matches)
        rate = match_rate(matched, len(list1), len(list2))
        logger.debug(f"{algorithm.value}: {matched} matched ({rate:.1f}%)")
        rates.append(AlgorithmRate(algorithm=algorithm, matched=matched, match_rate=rate))
    return rates


__all__ = ["ComparisonResult", "AlgorithmRate", "run_comparison", "compare_all_algorithms"]
