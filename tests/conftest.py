import random

import pytest

from adversle.datasets.wordlists import Lexicon

FIVE = ["crane", "slate", "stare", "trace", "apple", "angle", "ankle"]


class CountingRandom(random.Random):
    """random.Random that counts how many draws were made."""

    def __init__(self, seed=None):
        super().__init__(seed)
        self.calls = 0

    def randrange(self, *args, **kwargs):
        self.calls += 1
        return super().randrange(*args, **kwargs)


@pytest.fixture
def lexicon():
    # 'mark' is a name: a dictionary word but never a target
    return Lexicon.from_words(
        dictionary=FIVE + ["fuzzy", "jumpy", "door", "fish", "mark"],
        common=["door"] + FIVE + ["fish", "mark", "xyzzy"],
        names=["mark"],
    )


@pytest.fixture
def rng():
    return CountingRandom(1234)
