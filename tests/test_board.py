from adversle.engine import Clue, CluedLetter
from adversle.game import GameSession, Phase, RowState, letter_info, render_text, rows


def test_rows_for_fresh_session():
    s = GameSession(word_length=5, target="crane", pool=("crane",), current="cr")
    out = rows(s)
    assert len(out) == 6
    assert out[0].state is RowState.EDITING
    assert out[0].letters == (CluedLetter("c"), CluedLetter("r"))
    assert all(r.state is RowState.PENDING and r.letters == () for r in out[1:])


def test_locked_rows_are_clued_against_target():
    s = GameSession(word_length=5, target="angle", pool=("angle", "ankle"), guesses=("apple",))
    out = rows(s)
    assert out[0].state is RowState.LOCKED_IN
    assert [cl.clue for cl in out[0].letters] == [
        Clue.CORRECT, Clue.ABSENT, Clue.ABSENT, Clue.CORRECT, Clue.CORRECT]
    assert out[1].state is RowState.EDITING
    assert len(out) == 6


def test_no_editing_row_once_out_of_guesses():
    s = GameSession(word_length=5, target="crane", pool=("crane",),
                    guesses=("fuzzy",) * 6, phase=Phase.LOST)
    assert [r.state for r in rows(s)] == [RowState.LOCKED_IN] * 6


def test_letter_info_keeps_best_clue():
    s = GameSession(word_length=5, target="angle", pool=("angle",), guesses=("apple", "angel"))
    info = letter_info(s)
    assert info["a"] is Clue.CORRECT
    assert info["p"] is Clue.ABSENT
    assert info["e"] is Clue.CORRECT   # CORRECT in apple beats ELSEWHERE in angel
    assert info["l"] is Clue.CORRECT
    assert info["n"] is Clue.CORRECT and info["g"] is Clue.CORRECT
    assert "z" not in info


def test_letter_info_empty_without_guesses():
    s = GameSession(word_length=5, target="angle", pool=("angle",), current="apple")
    assert letter_info(s) == {}


def test_render_text():
    s = GameSession(word_length=5, target="angle", pool=("angle",), guesses=("apple",),
                    current="an")
    text = render_text(s)
    assert "A P P L E" in text
    assert "G - - G G" in text
    assert "A N _ _ _" in text
    assert "PY" not in text and "P-" in text
