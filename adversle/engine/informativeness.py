"""
How much a candidate target would have revealed, given the guesses so far.

Every CORRECT clue is worth CORRECT_WEIGHT and every ELSEWHERE clue is worth
ELSEWHERE_WEIGHT; ABSENT is worth nothing. The score is a plain sum over all
guesses and positions, so it never decreases as guesses are added and does
not depend on their order. Lower is less revealing.
"""

from typing import Iterable

from .clues import pattern

CORRECT_WEIGHT = 1.0
ELSEWHERE_WEIGHT = 0.5


def informativeness(candidate: str, guesses: Iterable[str]) -> float:
    total = 0.0
    for g in guesses:
        p = pattern(g, candidate)
        total += CORRECT_WEIGHT * p.count("G") + ELSEWHERE_WEIGHT * p.count("Y")
    return total
