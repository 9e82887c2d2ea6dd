"""
Word lists the game is played with.

Three external lists feed a game:
  - dictionary.txt : every word accepted as a guess (membership only)
  - common.txt     : words ranked by frequency, most common first
  - names.txt      : proper names that happen to be dictionary words

Targets are the first TARGET_FREQUENCY_CAP common words that are in the
dictionary and are not names, kept in frequency order.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, List, Tuple

from .io import read_words

DATA_DIR = Path(__file__).parent / "data"

# Deeper into the frequency list the targets get obscure.
TARGET_FREQUENCY_CAP = 20000

MIN_WORD_LENGTH = 4
MAX_WORD_LENGTH = 11


def check_word_length(length: int) -> int:
    if not MIN_WORD_LENGTH <= length <= MAX_WORD_LENGTH:
        raise ValueError(
            f"word length must be between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH}; got {length}")
    return length


def build_targets(common: Iterable[str], dictionary: Iterable[str], names: Iterable[str],
                  cap: int = TARGET_FREQUENCY_CAP) -> List[str]:
    """First `cap` frequency-ranked words, keeping dictionary words that aren't names."""
    dictionary = set(dictionary)
    names = set(names)
    return [w for w in list(common)[:cap] if w in dictionary and w not in names]


@dataclass(frozen=True)
class Lexicon:
    dictionary: FrozenSet[str]
    targets: Tuple[str, ...]

    @classmethod
    def from_words(cls, *, dictionary: Iterable[str], common: Iterable[str],
                   names: Iterable[str] = (), cap: int = TARGET_FREQUENCY_CAP) -> "Lexicon":
        dictionary = frozenset(dictionary)
        return cls(dictionary, tuple(build_targets(common, dictionary, names, cap)))

    def is_word(self, word: str) -> bool:
        return word in self.dictionary

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def targets_for(self, length: int) -> Tuple[str, ...]:
        """
        Full candidate list for `length`, in frequency order.

        Raises ValueError when the length is out of range or no target of
        that length survives filtering; a game can't start without one.
        """
        check_word_length(length)
        out = tuple(w for w in self.targets if len(w) == length)
        if not out:
            raise ValueError(f"No {length}-letter targets in the word lists")
        return out

    def words_of_length(self, length: int) -> List[str]:
        """Dictionary words of `length`, sorted (guess universe for players)."""
        return sorted(w for w in self.dictionary if len(w) == length)


def load_lexicon(dictionary_path: Path | str, common_path: Path | str,
                 names_path: Path | str | None = None,
                 cap: int = TARGET_FREQUENCY_CAP) -> Lexicon:
    names = read_words(names_path) if names_path else ()
    return Lexicon.from_words(dictionary=read_words(dictionary_path),
                              common=read_words(common_path),
                              names=names, cap=cap)


def default_paths() -> Tuple[Path, Path, Path]:
    return DATA_DIR / "dictionary.txt", DATA_DIR / "common.txt", DATA_DIR / "names.txt"


def default_lexicon() -> Lexicon:
    """Lexicon built from the small word lists bundled with the package."""
    return load_lexicon(*default_paths())
