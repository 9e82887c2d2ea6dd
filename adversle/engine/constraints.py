"""
Consistency of candidate targets with the game history.

Two views of the same question:

  - is_valid_replacement: the adversary's view. It knows the target currently
    in play and asks whether swapping in `candidate` would change any clue the
    player has already seen.
  - filter_candidates: the player's view. It only knows the (guess, pattern)
    pairs that were shown and keeps the words that would reproduce all of them.

Both compare clues position by position, never letters.
"""

from typing import Iterable, List, Tuple

from .clues import pattern

# Recorded feedback, as shown to the player.
History = Iterable[Tuple[str, str]]  # (guess, pattern)


def is_valid_replacement(candidate: str, current_target: str, guesses: Iterable[str]) -> bool:
    """
    True if every past guess clues identically against `candidate` and
    `current_target`. Vacuously true when no guess has been made.
    """
    return all(pattern(g, candidate) == pattern(g, current_target) for g in guesses)


def filter_candidates(words: Iterable[str], history: History, N: int) -> List[str]:
    """
    Keep only words (length == N) that would produce exactly the recorded
    patterns for every (guess, pattern) in `history`.

    Order of `words` is preserved.
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        # Skip anything that isn't a clean N-letter alpha token
        if len(w) != N or not w.isalpha():
            continue

        if all(pattern(g, w) == patt for g, patt in history):
            out.append(w)

    return out
