"""
Harness primitives: deterministic replay and player-vs-adversary games.

- replay:    push a sequence of events through the game, keeping every session.
- run_case:  one game of a simulated player against the adversary.
- run_batch: many games with per-game seeds derived from a base seed.

The player types its guesses as key events, so these games go through
exactly the same transitions a human's would.
"""

from __future__ import annotations
import random
import time
from typing import Dict, Iterable, List

from adversle.datasets.wordlists import Lexicon
from adversle.engine import filter_candidates
from adversle.game import ENTER, MAX_GUESSES, Event, GameSession, Phase, history, new_session, step


def replay(
        events: Iterable[Event],
        *,
        lexicon: Lexicon,
        rng: random.Random,
        word_length: int = 5,
        max_guesses: int = MAX_GUESSES,
) -> List[GameSession]:
    """
    Start a session and apply `events` in order.

    Returns the initial session followed by the session after each event.
    Two replays with identically seeded RNGs produce identical lists.
    """
    session = new_session(lexicon, rng, word_length=word_length, max_guesses=max_guesses)
    trace = [session]
    for ev in events:
        session = step(session, ev, lexicon=lexicon, rng=rng)
        trace.append(session)
    return trace


def type_word(session: GameSession, word: str, *, lexicon: Lexicon, rng) -> GameSession:
    """Type `word` letter by letter and press Enter."""
    for ev in [*word, ENTER]:
        session = step(session, ev, lexicon=lexicon, rng=rng)
    return session


def run_case(
        player,
        *,
        lexicon: Lexicon,
        N: int,
        max_guesses: int = MAX_GUESSES,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until the player wins or runs out of guesses.

    Args:
        player:      an object implementing BasePlayer with next_guess(state)
        lexicon:     dictionary + targets the game is played with
        N:           word length
        max_guesses: guess budget
        seed:        seeds both the adversary's draws and the player's tie-breaks

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), answer (str),
            pool_sizes (list[int], adversary pool after each guess)
    """
    rng = random.Random(seed)
    allowed = lexicon.words_of_length(N)
    player.reset(allowed=allowed, N=N, seed=seed)

    session = new_session(lexicon, rng, word_length=N, max_guesses=max_guesses)
    pool_sizes: List[int] = []

    t0 = time.time()
    while session.phase is Phase.PLAYING:
        seen = history(session)
        state = {
            "turn": len(seen) + 1,
            "history": seen,
            "candidates": filter_candidates(allowed, seen, N),
            "allowed": allowed,
            "N": N,
        }
        guess = player.next_guess(state)

        before = len(session.guesses)
        session = type_word(session, guess, lexicon=lexicon, rng=rng)
        if len(session.guesses) == before:
            raise ValueError(f"{player.id} guessed {guess!r}, rejected with hint {session.hint!r}")
        pool_sizes.append(len(session.pool))

    dt = (time.time() - t0) * 1000.0
    return {
        "success": session.phase is Phase.WON,
        "guesses": len(session.guesses),
        "time_ms": dt,
        "history": history(session),
        "answer": session.target,
        "pool_sizes": pool_sizes,
    }


def run_batch(
        player,
        *,
        lexicon: Lexicon,
        N: int,
        games: int,
        max_guesses: int = MAX_GUESSES,
        seed: int | None = None,
) -> List[Dict]:
    """
    Run `games` games back-to-back. Each case's seed is derived from the base
    seed (seed + index) so runs are reproducible but not identical.
    """
    out: List[Dict] = []
    for idx in range(1, games + 1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(player, lexicon=lexicon, N=N, max_guesses=max_guesses,
                            seed=case_seed))
    return out
