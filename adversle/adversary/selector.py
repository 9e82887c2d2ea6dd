"""
Adversarial target reselection.

After every wrong guess the hidden word is swapped for the least revealing
word that the player still cannot tell apart from it:

  1) Filter the pool to words that clue identically to the current target for
     every past guess (so the swap is never observable).
  2) Score each survivor by how much it has revealed (informativeness).
  3) Keep only the minimum-score words; that set becomes the new pool.
  4) Draw the new target uniformly from it with the caller's RNG.

The draw is the only nondeterminism here; pass a seeded random.Random to get
reproducible games.
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence, Tuple

import numpy as np

from adversle.engine import informativeness, is_valid_replacement


class Selection(NamedTuple):
    target: str
    pool: Tuple[str, ...]


def pick(words: Sequence[str], rng) -> str:
    """Uniform choice consuming a single random value."""
    if not words:
        raise ValueError("Cannot pick from an empty word list")
    return words[rng.randrange(len(words))]


def least_informative(words: Sequence[str], guesses: Sequence[str]) -> List[str]:
    """Words sharing the minimum informativeness score (order preserved)."""
    scores = np.fromiter((informativeness(w, guesses) for w in words),
                         dtype=float, count=len(words))
    keep = np.flatnonzero(scores == scores.min())
    return [words[i] for i in keep]


def reselect(pool: Sequence[str], current_target: str, guesses: Sequence[str], rng) -> Selection:
    """
    Pick the next worst-case target and the shrunk pool.

    Raises:
        ValueError if `pool` is empty or no word in it is consistent with the
        current target (the pool was already inconsistent with the history).
    """
    if not pool:
        raise ValueError("Candidate pool is empty")

    valid = [t for t in pool if is_valid_replacement(t, current_target, guesses)]
    if not valid:
        raise ValueError(
            f"No candidate in a pool of {len(pool)} is consistent with target {current_target!r}")

    worst = least_informative(valid, guesses)
    return Selection(pick(worst, rng), tuple(worst))
