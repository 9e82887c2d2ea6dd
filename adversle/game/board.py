"""
What the renderer needs from a session: the rows of the grid, the keyboard
highlighting, and a plain-text rendering for terminals.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from adversle.engine import Clue, CluedLetter, clue

from .state import GameSession


class RowState(Enum):
    LOCKED_IN = "locked_in"
    EDITING = "editing"
    PENDING = "pending"


@dataclass(frozen=True)
class Row:
    state: RowState
    letters: Tuple[CluedLetter, ...]


def rows(session: GameSession) -> List[Row]:
    """
    One row per allowed guess: locked guesses clued against the current
    target, then the guess being typed, then empty rows.
    """
    out: List[Row] = [Row(RowState.LOCKED_IN, tuple(clue(g, session.target)))
                      for g in session.guesses]
    if len(out) < session.max_guesses:
        out.append(Row(RowState.EDITING, tuple(CluedLetter(ch) for ch in session.current)))
    while len(out) < session.max_guesses:
        out.append(Row(RowState.PENDING, ()))
    return out


def letter_info(session: GameSession) -> Dict[str, Clue]:
    """Best clue seen so far for every guessed letter."""
    info: Dict[str, Clue] = {}
    for g in session.guesses:
        for letter, c in clue(g, session.target):
            if letter not in info or c > info[letter]:
                info[letter] = c
    return info


_KEYBOARD = ("qwertyuiop", "asdfghjkl", "zxcvbnm")


def render_text(session: GameSession) -> str:
    """
    Plain-text board. Locked letters are shown uppercase with their clue
    symbol underneath; the keyboard marks each letter with its best clue.
    """
    lines: List[str] = []
    width = session.word_length
    for row in rows(session):
        if row.state is RowState.LOCKED_IN:
            lines.append(" ".join(cl.letter.upper() for cl in row.letters))
            lines.append(" ".join(cl.clue.symbol for cl in row.letters))
        else:
            typed = [cl.letter.upper() for cl in row.letters]
            lines.append(" ".join(typed + ["_"] * (width - len(typed))))

    info = letter_info(session)
    lines.append("")
    for keys in _KEYBOARD:
        lines.append(" ".join(f"{k.upper()}{info[k].symbol if k in info else ' '}" for k in keys))
    return "\n".join(lines)
