# apps/cli/play.py
"""
Play adversle in the terminal.

Each input line is one of:
  - a word          : typed letter by letter, then Enter
  - (empty line)    : Enter (starts a new game once one is over)
  - :giveup         : reveal the answer (after at least one guess)
  - :length N       : switch to N-letter words (4..11), discarding the game
  - :quit           : leave

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --N 6 --seed 42 --verbose
"""

from __future__ import annotations

import argparse
import random
import sys

from adversle.datasets.wordlists import default_paths, load_lexicon
from adversle.game import BACKSPACE, ENTER, GiveUp, Phase, SetWordLength, new_session, render_text, step


USAGE = "commands: :giveup, :length N, :quit"


def line_events(line: str, session) -> list:
    """
    Events for one input line (other than :quit).

    Raises ValueError for a malformed or unknown colon command.
    """
    if line == ":giveup":
        return [GiveUp()]
    if line.split()[:1] == [":length"]:
        parts = line.split()
        if len(parts) != 2 or not parts[1].isdigit():
            raise ValueError("usage: :length N")
        return [SetWordLength(int(parts[1]))]
    if line.startswith(":"):
        raise ValueError(f"unknown command {line!r}; {USAGE}")

    events = []
    if session.phase is Phase.PLAYING:
        # Start every line from an empty row
        events += [BACKSPACE] * len(session.current)
        events += list(line)
    return events + [ENTER]


def main():
    dict_default, common_default, names_default = default_paths()

    ap = argparse.ArgumentParser(description="adversle: the hidden word moves after every guess")
    ap.add_argument("--N", type=int, default=5, help="word length (4..11)")
    ap.add_argument("--max-guesses", type=int, default=6, help="guess budget")
    ap.add_argument("--dictionary", default=str(dict_default), help="accepted guesses, one per line")
    ap.add_argument("--common", default=str(common_default), help="frequency-ranked word list")
    ap.add_argument("--names", default=str(names_default), help="proper names excluded from targets")
    ap.add_argument("--seed", type=int, help="RNG seed (for reproducible games)")
    ap.add_argument("--verbose", action="store_true", help="show the adversary's pool size")
    args = ap.parse_args()

    lexicon = load_lexicon(args.dictionary, args.common, args.names)
    rng = random.Random(args.seed)
    session = new_session(lexicon, rng, word_length=args.N, max_guesses=args.max_guesses)

    while True:
        print(render_text(session))
        if session.hint:
            print(session.hint)
        if args.verbose:
            print(f"[pool: {len(session.pool)}]", file=sys.stderr)

        try:
            line = input("> ").strip().lower()
        except EOFError:
            print()
            return

        if line == ":quit":
            return
        try:
            for ev in line_events(line, session):
                session = step(session, ev, lexicon=lexicon, rng=rng)
        except ValueError as e:
            print(e, file=sys.stderr)


if __name__ == "__main__":
    main()
