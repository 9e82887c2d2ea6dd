from .state import (
    BACKSPACE, ENTER, MAX_GUESSES, DEFAULT_WORD_LENGTH,
    Event, GameSession, GiveUp, Phase, SetWordLength,
    history, new_session, step,
)
from .board import Row, RowState, letter_info, render_text, rows

__all__ = [
    "BACKSPACE", "ENTER", "MAX_GUESSES", "DEFAULT_WORD_LENGTH",
    "Event", "GameSession", "GiveUp", "Phase", "SetWordLength",
    "history", "new_session", "step",
    "Row", "RowState", "letter_info", "render_text", "rows",
]
