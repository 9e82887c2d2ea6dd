"""
Per-letter feedback (clues) for a single (guess, target) pair.

Conventions:
  - Clue.CORRECT   'G' : right letter, right position
  - Clue.ELSEWHERE 'Y' : right letter, wrong position
  - Clue.ABSENT    '-' : letter not present (or present fewer times than guessed)

The clue kinds are totally ordered, CORRECT > ELSEWHERE > ABSENT, which is
what the keyboard highlighting relies on.

Algorithm (two-pass, duplicate-aware):
  1) First pass marks every exact match and counts the target letters that
     were NOT matched exactly.
  2) Second pass walks the remaining guess positions left-to-right and marks
     ELSEWHERE only while that letter still has unconsumed count.
"""

from __future__ import annotations

from collections import Counter
from enum import IntEnum
from typing import Iterable, List, NamedTuple, Optional


class Clue(IntEnum):
    ABSENT = 0
    ELSEWHERE = 1
    CORRECT = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, ch: str) -> "Clue":
        try:
            return _BY_SYMBOL[ch]
        except KeyError as e:
            raise ValueError(f"Unknown clue symbol: {ch!r}") from e


_SYMBOLS = {Clue.ABSENT: "-", Clue.ELSEWHERE: "Y", Clue.CORRECT: "G"}
_BY_SYMBOL = {v: k for k, v in _SYMBOLS.items()}


class CluedLetter(NamedTuple):
    letter: str
    clue: Optional[Clue] = None


def pattern(guess: str, target: str) -> str:
    """
    Compute the feedback pattern for `guess` against `target`.

    Preconditions:
      - len(guess) == len(target)

    Returns:
      - string of length N composed only of 'G', 'Y', '-'

    Examples:
      pattern("belle", "level") -> "-GYYY"
      pattern("lemon", "level") -> "GG---"
    """
    assert len(guess) == len(target), "Guess and target must be the same length"

    n = len(guess)
    out = ["-"] * n

    # Pass 1: exact matches; everything else in the target goes into the pool
    remaining: Counter = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            out[i] = "G"
        else:
            remaining[t] += 1

    # Pass 2: yellows, capped by the leftover multiplicity
    for i, g in enumerate(guess):
        if out[i] == "G":
            continue
        if remaining[g] > 0:
            out[i] = "Y"
            remaining[g] -= 1

    return "".join(out)


def clue(guess: str, target: str) -> List[CluedLetter]:
    """Clued letters for every position of `guess`."""
    return [
        CluedLetter(letter, Clue.from_symbol(ch))
        for letter, ch in zip(guess, pattern(guess, target))
    ]


def pattern_of(clued: Iterable[CluedLetter]) -> str:
    """Collapse clued letters back into a pattern string."""
    return "".join(cl.clue.symbol for cl in clued)


def clues_from_pattern(patt: str) -> List[Clue]:
    return [Clue.from_symbol(ch) for ch in patt]
