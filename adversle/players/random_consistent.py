"""
Random Consistent player.

Strategy:
  - Guess uniformly at random among dictionary words still consistent with
    every pattern seen so far.
  - If nothing is consistent (the word lists disagree), fall back to any
    allowed word.
"""

from __future__ import annotations

from typing import List
from .base import BasePlayer, register


@register
class RandomConsistentPlayer(BasePlayer):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Args:
            state: dict with keys:
                - "candidates": dictionary words consistent with history
                - "allowed":    guess universe (already length N)
        """
        candidates: List[str] = state["candidates"]
        pool: List[str] = candidates or state["allowed"]
        if not pool:
            raise ValueError(f"No {self.N}-letter words to guess from")
        return pool[self.rng.randrange(len(pool))]
