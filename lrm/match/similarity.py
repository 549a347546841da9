"""String similarity primitives used by the matching strategies.

All functions are pure and total over ``str`` input (empty strings included).
Similarities are expressed on a 0-100 scale; distances are edit counts.

Edit distances come from rapidfuzz (called without a processor, so callers
decide about case folding and trimming). Soundex, Jaro and the Winkler prefix
bonus are computed here.
"""

from __future__ import annotations
from typing import Dict, Optional

from rapidfuzz.distance import DamerauLevenshtein, Levenshtein

# --- Exact -----------------------------------------------------------------

def exact_match(a: str, b: str, ignore_case: bool = True) -> bool:
    """Equality after trimming (and lower-casing when ``ignore_case``)."""
    if ignore_case:
        return a.lower().strip() == b.lower().strip()
    return a.strip() == b.strip()

# --- Soundex ---------------------------------------------------------------

_SOUNDEX_CODES: Dict[str, str] = {
    **dict.fromkeys("BFPV", "1"),
    **dict.fromkeys("CGJKQSXZ", "2"),
    **dict.fromkeys("DT", "3"),
    "L": "4",
    **dict.fromkeys("MN", "5"),
    "R": "6",
}
_NO_CODE = "0"


def soundex(s: str) -> Optional[str]:
    """Return the 4-character Soundex code of ``s`` or None if it has no letters.

    Vowels and H/W/Y carry no digit and reset the previous-digit tracker, so
    a repeated group separated by one of them is emitted again
    (``"Tymczak" -> "T522"``).
    """
    cleaned = "".join(c for c in s.upper() if "A" <= c <= "Z")
    if not cleaned:
        return None

    code = cleaned[0]
    prev = _SOUNDEX_CODES.get(cleaned[0], _NO_CODE)
    for ch in cleaned[1:]:
        if len(code) >= 4:
            break
        digit = _SOUNDEX_CODES.get(ch)
        if digit is None:
            prev = _NO_CODE
        elif digit != prev:
            code += digit
            prev = digit
    return code.ljust(4, "0")


def soundex_match(a: str, b: str) -> bool:
    code_a = soundex(a)
    return code_a is not None and code_a == soundex(b)

# --- Edit distances --------------------------------------------------------

def _similarity_from_distance(distance: int, len1: int, len2: int) -> float:
    max_len = max(len1, len2)
    if max_len == 0:
        return 100.0
    return (max_len - distance) / max_len * 100


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character inserts, deletes and substitutions."""
    return Levenshtein.distance(a, b)


def levenshtein_similarity(a: str, b: str) -> float:
    return _similarity_from_distance(levenshtein_distance(a, b), len(a), len(b))


def damerau_levenshtein_distance(a: str, b: str) -> int:
    """Unrestricted Damerau-Levenshtein distance (adjacent transpositions allowed).

    Unlike optimal string alignment, a substring may be edited again after a
    transposition, so ``"ca" -> "abc"`` costs 2 rather than 3.
    """
    return DamerauLevenshtein.distance(a, b)


def damerau_levenshtein_similarity(a: str, b: str) -> float:
    return _similarity_from_distance(damerau_levenshtein_distance(a, b), len(a), len(b))

# --- Jaro / Jaro-Winkler ---------------------------------------------------

def jaro_similarity(a: str, b: str) -> float:
    """Jaro similarity on the 0-100 scale (100 for two empty strings).

    Each character of ``a`` claims the first unclaimed equal character of
    ``b`` inside the match window, scanning left to right. With repeated
    characters the match set and transposition count depend on that order.
    """
    if a == b:
        return 100.0
    len1, len2 = len(a), len(b)
    if len1 == 0 or len2 == 0:
        return 0.0

    window = max(max(len1, len2) // 2 - 1, 0)
    matched1 = [False] * len1
    matched2 = [False] * len2
    matches = 0
    for i, ch in enumerate(a):
        start = max(0, i - window)
        end = min(i + window + 1, len2)
        for j in range(start, end):
            if not matched2[j] and b[j] == ch:
                matched1[i] = matched2[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    # Walk both match sequences in order and count disagreeing pairs
    mismatched = 0
    k = 0
    for i in range(len1):
        if not matched1[i]:
            continue
        while not matched2[k]:
            k += 1
        if a[i] != b[k]:
            mismatched += 1
        k += 1
    transpositions = mismatched / 2

    jaro = (matches / len1 + matches / len2 + (matches - transpositions) / matches) / 3
    return jaro * 100


def _common_prefix_length(a: str, b: str, limit: int = 4) -> int:
    n = 0
    for ca, cb in zip(a[:limit], b[:limit]):
        if ca != cb:
            break
        n += 1
    return n


def jaro_winkler_similarity(a: str, b: str, prefix_scale: float = 0.1) -> float:
    """Jaro similarity plus a small bonus for the shared prefix (up to 4 characters).

    The bonus is ``prefix * prefix_scale * (1 - jaro / 100)`` added to the
    0-100 Jaro score, so it stays below half a point.
    """
    jaro = jaro_similarity(a, b)
    prefix = _common_prefix_length(a, b)
    return min(100.0, jaro + prefix * prefix_scale * (1.0 - jaro / 100.0))

# --- Token sort ------------------------------------------------------------

def sort_tokens(s: str) -> str:
    """Lower-case, split on whitespace runs, sort and rejoin with single spaces."""
    return " ".join(sorted(s.lower().strip().split()))


def token_sort_ratio(a: str, b: str) -> float:
    """Levenshtein similarity of the token-sorted forms (word order ignored).

    Always case-folds, independent of any caller-side ``ignore_case`` flag.
    """
    return levenshtein_similarity(sort_tokens(a), sort_tokens(b))


__all__ = [
    "exact_match",
    "soundex",
    "soundex_match",
    "levenshtein_distance",
    "levenshtein_similarity",
    "damerau_levenshtein_distance",
    "damerau_levenshtein_similarity",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "sort_tokens",
    "token_sort_ratio",
]
