"""
Game session and its transition function.

A GameSession is an immutable value. Every key press or UI action goes
through `step(session, event, ...)`, which returns the next session (or the
same one when the event does nothing). The adversary is consulted in exactly
one place: when a wrong guess is locked in and guesses remain.

Events:
  - "a".."z"          : type a letter
  - BACKSPACE, ENTER  : edit / lock in the current guess
  - SetWordLength(n)  : start over with n-letter words
  - GiveUp()          : reveal the target (only once a guess has been made)

Nothing here draws randomness on its own; the caller hands in an RNG
(e.g. random.Random(seed)) so games can be replayed exactly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Tuple, Union

from adversle.adversary import pick, reselect
from adversle.datasets.wordlists import Lexicon, check_word_length
from adversle.engine import guess_problem, pattern

MAX_GUESSES = 6
DEFAULT_WORD_LENGTH = 5

BACKSPACE = "Backspace"
ENTER = "Enter"

FIRST_GUESS_HINT = "Make your first guess!"
WON_HINT = "You won! (Enter to play again)"

_LETTER = re.compile(r"[a-z]")


class Phase(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class SetWordLength:
    length: int


@dataclass(frozen=True)
class GiveUp:
    pass


Event = Union[str, SetWordLength, GiveUp]


@dataclass(frozen=True)
class GameSession:
    word_length: int
    target: str
    pool: Tuple[str, ...]
    guesses: Tuple[str, ...] = ()
    current: str = ""
    phase: Phase = Phase.PLAYING
    hint: str = ""
    max_guesses: int = MAX_GUESSES

    @property
    def guesses_left(self) -> int:
        return self.max_guesses - len(self.guesses)

    @property
    def can_give_up(self) -> bool:
        return self.phase is Phase.PLAYING and len(self.guesses) > 0


def lost_hint(target: str) -> str:
    return f"You lost! The answer was {target.upper()}. (Enter to play again)"


def gave_up_hint(target: str) -> str:
    return f"The answer was {target.upper()}. (Enter to play again)"


def length_hint(length: int) -> str:
    return f"{length} letters"


def new_session(lexicon: Lexicon, rng, *, word_length: int = DEFAULT_WORD_LENGTH,
                max_guesses: int = MAX_GUESSES, hint: str = FIRST_GUESS_HINT) -> GameSession:
    """
    Fresh game: the pool is the full candidate list for `word_length` and the
    target is drawn uniformly from it.

    Raises ValueError when no target of that length exists.
    """
    if max_guesses < 1:
        raise ValueError(f"max_guesses must be positive; got {max_guesses}")
    pool = lexicon.targets_for(word_length)
    return GameSession(
        word_length=word_length,
        target=pick(pool, rng),
        pool=pool,
        max_guesses=max_guesses,
        hint=hint,
    )


def history(session: GameSession) -> List[Tuple[str, str]]:
    """Locked guesses with the patterns the player was shown."""
    return [(g, pattern(g, session.target)) for g in session.guesses]


def step(session: GameSession, event: Event, *, lexicon: Lexicon, rng) -> GameSession:
    """Apply one event and return the resulting session."""
    if isinstance(event, SetWordLength):
        return _set_word_length(session, event.length, lexicon, rng)
    if isinstance(event, GiveUp):
        return _give_up(session)

    if session.phase is not Phase.PLAYING:
        # Finished games only listen for Enter, which starts the next one
        if event == ENTER:
            return _reset(session, lexicon, rng)
        return session

    if len(session.guesses) >= session.max_guesses:
        return session

    if _LETTER.fullmatch(event):
        return replace(session, current=(session.current + event)[: session.word_length], hint="")
    if event == BACKSPACE:
        return replace(session, current=session.current[:-1], hint="")
    if event == ENTER:
        return _lock_in(session, lexicon, rng)
    return session


def _lock_in(session: GameSession, lexicon: Lexicon, rng) -> GameSession:
    """
    Commit the current guess. Only a wrong guess with guesses left consults
    the adversary, so the pool stays indistinguishable from the target only
    while phase is PLAYING; the finishing guess leaves the pool as it was.
    """
    guess = session.current
    problem = guess_problem(guess, lexicon, session.word_length)
    if problem:
        return replace(session, hint=problem)

    guesses = session.guesses + (guess,)
    locked = replace(session, guesses=guesses, current="")

    if guess == session.target:
        return replace(locked, phase=Phase.WON, hint=WON_HINT)
    if len(guesses) == session.max_guesses:
        return replace(locked, phase=Phase.LOST, hint=lost_hint(session.target))

    target, pool = reselect(session.pool, session.target, guesses, rng)
    return replace(locked, target=target, pool=pool, hint="")


def _give_up(session: GameSession) -> GameSession:
    if not session.can_give_up:
        return session
    return replace(session, phase=Phase.LOST, hint=gave_up_hint(session.target))


def _reset(session: GameSession, lexicon: Lexicon, rng) -> GameSession:
    return new_session(lexicon, rng, word_length=session.word_length,
                       max_guesses=session.max_guesses, hint="")


def _set_word_length(session: GameSession, length: int, lexicon: Lexicon, rng) -> GameSession:
    check_word_length(length)
    return new_session(lexicon, rng, word_length=length,
                       max_guesses=session.max_guesses, hint=length_hint(length))
