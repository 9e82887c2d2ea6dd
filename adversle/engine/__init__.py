from .clues import Clue, CluedLetter, clue, pattern
from .constraints import filter_candidates, is_valid_replacement
from .informativeness import informativeness
from .validation import guess_problem, validate_guess

__all__ = [
    "Clue", "CluedLetter", "clue", "pattern",
    "filter_candidates", "is_valid_replacement",
    "informativeness",
    "guess_problem", "validate_guess",
]
