"""
Guess validation at lock-in time.

A guess may be locked in iff:
  - it has exact length N
  - it exists in the dictionary

Problems are reported as the hint text shown to the player rather than as
exceptions; neither case mutates the committed game state.
"""

from typing import Container, Optional

TOO_SHORT = "Too short"
NOT_A_WORD = "Not a valid word"


def guess_problem(word: str, dictionary: Container[str], N: int) -> Optional[str]:
    """
    Return the hint explaining why `word` cannot be locked in, or None.

    Length is checked first, so a short non-word reports "Too short".
    """
    if len(word) != N:
        return TOO_SHORT
    if word not in dictionary:
        return NOT_A_WORD
    return None


def validate_guess(word: str, dictionary: Container[str], N: int) -> bool:
    return guess_problem(word, dictionary, N) is None
