"""
Letter-Frequency player (distinct-letter coverage).

Idea:
  - Build a letter histogram over the words still consistent with the
    feedback. Score each of them by the summed frequency of its DISTINCT
    letters and guess the best one; seeded RNG breaks ties.

Against an adversary this tends to last longer than random play: it probes
the letters the remaining pool shares most, which is exactly what the
adversary is trying to keep hidden.
"""

from __future__ import annotations
from collections import Counter
from typing import List
from .base import BasePlayer, register


@register
class LetterFreqPlayer(BasePlayer):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def _score_word(self, w: str, counts: Counter) -> int:
        return sum(counts[ch] for ch in set(w))

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        pool: List[str] = candidates or state["allowed"]
        if not pool:
            raise ValueError(f"No {self.N}-letter words to guess from")

        counts = Counter("".join(pool))

        best_score = None
        best_words: List[str] = []
        for w in pool:
            s = self._score_word(w, counts)
            if best_score is None or s > best_score:
                best_score = s
                best_words = [w]
            elif s == best_score:
                best_words.append(w)

        return best_words[self.rng.randrange(len(best_words))]
