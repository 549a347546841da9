"""Match / no-match strategies (no similarity score)."""
from __future__ import annotations
from typing import Optional

from .base import MatchStrategy
from ..models import Algorithm, Binary
from ..similarity import soundex


class ExactMatchStrategy(MatchStrategy):
    algorithm = Algorithm.EXACT

    def compare(self, left: str, right: str) -> Binary:
        return Binary(left == right)


class SoundexMatchStrategy(MatchStrategy):
    """Phonetic equality. Case is irrelevant since Soundex upper-cases anyway."""

    algorithm = Algorithm.SOUNDEX

    def prepare(self, item: str) -> Optional[str]:
        return soundex(item)

    def compare(self, left: Optional[str], right: Optional[str]) -> Binary:
        return Binary(left is not None and left == right)
