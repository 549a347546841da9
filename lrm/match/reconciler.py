"""List reconciliation: greedy bipartite matching of two item lists.

Matching is deliberately greedy and order dependent rather than a globally
optimal assignment:

- Binary algorithms (exact, soundex): each list-1 item, in order, claims the
  FIRST still-unclaimed list-2 item that matches.
- Scored algorithms: each list-1 item, in order, claims the still-unclaimed
  list-2 item with the strictly greatest score at or above the threshold;
  equal scores keep the lowest list-2 index and a score of 0 never matches.

Once claimed, a list-2 item is never reconsidered, even if a later list-1
item would have scored higher against it.
"""

from __future__ import annotations
import logging
from collections import defaultdict, deque
from typing import Deque, Dict, List, Optional, Sequence

from .alignment import align
from .models import Algorithm, MatchOptions, MatchPair, ReconciliationResult
from .strategies import MatchStrategy, get_strategy

logger = logging.getLogger(__name__)


def reconcile(list1: Sequence[str], list2: Sequence[str], options: Optional[MatchOptions] = None) -> ReconciliationResult:
    """Partition ``list1`` and ``list2`` into matches and per-side leftovers.

    Args:
        list1: First collection (may be empty, may contain duplicates)
        list2: Second collection
        options: Algorithm, case policy and threshold (defaults to exact, ignore case)

    Returns:
        ReconciliationResult; leftovers keep their original order
    """
    options = options or MatchOptions()
    strategy = get_strategy(options.algorithm, options.ignore_case)

    claimed1 = [False] * len(list1)
    claimed2 = [False] * len(list2)

    if not list1 or not list2:
        matches: List[MatchPair] = []
    elif strategy.is_scored:
        matches = _match_scored(list1, list2, strategy, options.threshold, claimed1, claimed2)
    elif options.algorithm is Algorithm.SOUNDEX:
        matches = _match_bucketed(list1, list2, strategy, claimed1, claimed2)
    else:
        matches = _match_first_fit(list1, list2, strategy, claimed1, claimed2)

    first_idx = [i for i, taken in enumerate(claimed1) if not taken]
    second_idx = [j for j, taken in enumerate(claimed2) if not taken]

    logger.debug(
        f"reconcile algorithm={options.algorithm.value} ignore_case={options.ignore_case} "
        f"threshold={options.threshold:g}: {len(matches)} matched, "
        f"{len(first_idx)} only in first, {len(second_idx)} only in second"
    )

    return ReconciliationResult(
        matches=matches,
        only_in_first=[list1[i] for i in first_idx],
        only_in_second=[list2[j] for j in second_idx],
        only_in_first_indices=first_idx,
        only_in_second_indices=second_idx,
    )


def _accept(
    list1: Sequence[str],
    list2: Sequence[str],
    i: int,
    j: int,
    strategy: MatchStrategy,
    claimed1: List[bool],
    claimed2: List[bool],
    similarity: Optional[float] = None,
) -> MatchPair:
    claimed1[i] = True
    claimed2[j] = True
    return MatchPair(
        item1=list1[i],
        item2=list2[j],
        index1=i,
        index2=j,
        algorithm=strategy.algorithm,
        similarity=similarity,
        alignment=align(list1[i], list2[j]),
    )


def _match_first_fit(list1, list2, strategy, claimed1, claimed2) -> List[MatchPair]:
    prepared2 = [strategy.prepare(item) for item in list2]
    matches: List[MatchPair] = []
    for i, item in enumerate(list1):
        left = strategy.prepare(item)
        for j, right in enumerate(prepared2):
            if claimed2[j]:
                continue
            if strategy.compare(left, right).matched:
                matches.append(_accept(list1, list2, i, j, strategy, claimed1, claimed2))
                break
    return matches


def _match_bucketed(list1, list2, strategy, claimed1, claimed2) -> List[MatchPair]:
    """First-fit over list-2 items grouped by their comparison key.

    Items whose key is None (e.g. no letters for Soundex) are never bucketed
    and therefore never match.
    """
    buckets: Dict[str, Deque[int]] = defaultdict(deque)
    for j, item in enumerate(list2):
        key = strategy.prepare(item)
        if key is not None:
            buckets[key].append(j)

    matches: List[MatchPair] = []
    for i, item in enumerate(list1):
        key = strategy.prepare(item)
        if key is None:
            continue
        candidates = buckets.get(key)
        if candidates:
            j = candidates.popleft()
            matches.append(_accept(list1, list2, i, j, strategy, claimed1, claimed2))
    return matches


def _match_scored(list1, list2, strategy, threshold: float, claimed1, claimed2) -> List[MatchPair]:
    prepared2 = [strategy.prepare(item) for item in list2]
    debug_logging = logger.isEnabledFor(logging.DEBUG)
    matches: List[MatchPair] = []

    for i, item in enumerate(list1):
        left = strategy.prepare(item)
        best_j = -1
        # A zero score never wins, even with threshold 0
        best_score = 0.0

        for j, right in enumerate(prepared2):
            if claimed2[j]:
                continue
            value = strategy.compare(left, right).value
            if value >= threshold and value > best_score:
                best_score = value
                best_j = j

        if best_j >= 0:
            if debug_logging:
                logger.debug(f"[{strategy.get_name()}] {item!r} -> {list2[best_j]!r} ({best_score:.2f})")
            matches.append(_accept(list1, list2, i, best_j, strategy, claimed1, claimed2, similarity=best_score))
    return matches


__all__ = ["reconcile"]
