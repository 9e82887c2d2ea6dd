import pytest

from adversle.datasets.wordlists import Lexicon
from adversle.engine import pattern
from adversle.game import (
    BACKSPACE, ENTER, GameSession, GiveUp, Phase, SetWordLength, history, new_session, step,
)
from adversle.game.state import FIRST_GUESS_HINT, WON_HINT, gave_up_hint, lost_hint

from conftest import CountingRandom


def press(session, keys, lexicon, rng):
    for k in keys:
        session = step(session, k, lexicon=lexicon, rng=rng)
    return session


def guess(session, word, lexicon, rng):
    return press(session, [*word, ENTER], lexicon, rng)


def test_new_session(lexicon, rng):
    s = new_session(lexicon, rng)
    assert s.phase is Phase.PLAYING
    assert s.guesses == () and s.current == ""
    assert s.pool == lexicon.targets_for(5)
    assert s.target in s.pool
    assert s.hint == FIRST_GUESS_HINT
    assert s.max_guesses == 6


def test_typing_is_capped_and_filtered(lexicon, rng):
    s = new_session(lexicon, rng)
    s = press(s, "cranes", lexicon, rng)
    assert s.current == "crane"
    assert s.hint == ""
    # only single lowercase letters count as typing
    assert step(s, "A", lexicon=lexicon, rng=rng) is s
    assert step(s, "Shift", lexicon=lexicon, rng=rng) is s
    assert step(s, "a\n", lexicon=lexicon, rng=rng) is s
    assert step(s, "ab", lexicon=lexicon, rng=rng) is s


def test_backspace(lexicon, rng):
    s = press(new_session(lexicon, rng), "cr", lexicon, rng)
    s = step(s, BACKSPACE, lexicon=lexicon, rng=rng)
    assert s.current == "c"
    s = press(s, [BACKSPACE, BACKSPACE], lexicon, rng)
    assert s.current == ""


def test_backspace_clears_hint(lexicon, rng):
    s = guess(new_session(lexicon, rng), "cra", lexicon, rng)
    assert s.hint == "Too short"
    s = step(s, BACKSPACE, lexicon=lexicon, rng=rng)
    assert s.current == "cr"
    assert s.hint == ""


def test_too_short_and_not_a_word(lexicon, rng):
    s = guess(new_session(lexicon, rng), "cra", lexicon, rng)
    assert s.hint == "Too short"
    assert s.guesses == () and s.current == "cra"

    s = guess(new_session(lexicon, rng), "zzzzz", lexicon, rng)
    assert s.hint == "Not a valid word"
    assert s.guesses == () and s.phase is Phase.PLAYING


def test_step_does_not_mutate(lexicon, rng):
    s = new_session(lexicon, rng)
    after = guess(s, "fuzzy", lexicon, rng)
    assert s.guesses == () and after.guesses == ("fuzzy",)


def test_wrong_guess_reselects_a_consistent_target(lexicon, rng):
    s = GameSession(word_length=5, target="angle", pool=lexicon.targets_for(5))
    s = guess(s, "apple", lexicon, rng)
    assert s.phase is Phase.PLAYING
    assert s.guesses == ("apple",) and s.current == "" and s.hint == ""
    assert s.pool == ("angle", "ankle")
    assert s.target in s.pool
    assert rng.calls == 1


@pytest.mark.parametrize("seed", range(5))
def test_pool_stays_indistinguishable_from_target(lexicon, seed):
    rng = CountingRandom(seed)
    s = new_session(lexicon, rng)
    for word in ["fuzzy", "apple", "slate"]:
        s = guess(s, word, lexicon, rng)
        if s.phase is not Phase.PLAYING:
            break
        assert s.target in s.pool
        for g in s.guesses:
            assert {pattern(g, t) for t in s.pool} == {pattern(g, s.target)}


def test_history_reports_shown_patterns(lexicon, rng):
    s = GameSession(word_length=5, target="angle", pool=lexicon.targets_for(5))
    s = guess(s, "apple", lexicon, rng)
    assert history(s) == [("apple", "G--GG")]


def test_win_stops_reselection():
    lexicon = Lexicon.from_words(dictionary=["crane", "fuzzy"], common=["crane"])
    rng = CountingRandom(0)
    s = new_session(lexicon, rng)
    assert rng.calls == 1
    s = guess(s, "crane", lexicon, rng)
    assert s.phase is Phase.WON
    assert s.hint == WON_HINT
    assert s.target == "crane" and s.pool == ("crane",)
    assert s.guesses == ("crane",)
    assert rng.calls == 1

    # finished games ignore typing; Enter starts over
    assert step(s, "a", lexicon=lexicon, rng=rng) is s
    s = step(s, ENTER, lexicon=lexicon, rng=rng)
    assert s.phase is Phase.PLAYING
    assert s.guesses == () and s.hint == ""


def test_six_wrong_guesses_lose(lexicon, rng):
    s = new_session(lexicon, rng)
    for i in range(5):
        s = guess(s, "fuzzy", lexicon, rng)
        assert s.phase is Phase.PLAYING
        assert len(s.guesses) == i + 1
    s = guess(s, "fuzzy", lexicon, rng)
    assert s.phase is Phase.LOST
    assert len(s.guesses) == 6
    assert s.hint == lost_hint(s.target)
    assert s.hint == f"You lost! The answer was {s.target.upper()}. (Enter to play again)"
    assert step(s, "a", lexicon=lexicon, rng=rng) is s


def test_reset_draws_from_full_list(lexicon, rng):
    s = GameSession(word_length=5, target="angle", pool=lexicon.targets_for(5))
    s = guess(s, "apple", lexicon, rng)
    s = step(s, GiveUp(), lexicon=lexicon, rng=rng)
    s = step(s, ENTER, lexicon=lexicon, rng=rng)
    assert s.pool == lexicon.targets_for(5)


def test_give_up(lexicon, rng):
    s = new_session(lexicon, rng)
    assert s.can_give_up is False
    assert step(s, GiveUp(), lexicon=lexicon, rng=rng) is s

    s = guess(s, "fuzzy", lexicon, rng)
    s = step(s, GiveUp(), lexicon=lexicon, rng=rng)
    assert s.phase is Phase.LOST
    assert s.hint == gave_up_hint(s.target)
    assert s.hint == f"The answer was {s.target.upper()}. (Enter to play again)"
    # already over
    assert step(s, GiveUp(), lexicon=lexicon, rng=rng) is s


def test_set_word_length(lexicon, rng):
    s = press(new_session(lexicon, rng), "fuzzy", lexicon, rng)
    s = step(s, ENTER, lexicon=lexicon, rng=rng)
    s = press(s, "ap", lexicon, rng)

    s = step(s, SetWordLength(4), lexicon=lexicon, rng=rng)
    assert s.word_length == 4
    assert s.guesses == () and s.current == ""
    assert s.hint == "4 letters"
    assert s.pool == ("door", "fish")
    assert s.target in s.pool
    assert s.phase is Phase.PLAYING


def test_set_word_length_from_finished_game(lexicon, rng):
    s = new_session(lexicon, rng)
    s = step(guess(s, "fuzzy", lexicon, rng), GiveUp(), lexicon=lexicon, rng=rng)
    s = step(s, SetWordLength(5), lexicon=lexicon, rng=rng)
    assert s.phase is Phase.PLAYING and s.guesses == ()


@pytest.mark.parametrize("length", [3, 6, 12])
def test_set_word_length_rejects_unplayable(lexicon, rng, length):
    # 3 and 12 are out of range; there are no 6-letter targets
    with pytest.raises(ValueError):
        step(new_session(lexicon, rng), SetWordLength(length), lexicon=lexicon, rng=rng)


def test_finishing_guess_leaves_pool_alone(lexicon, rng):
    full = lexicon.targets_for(5)
    s = GameSession(word_length=5, target="apple", pool=full)
    s = guess(s, "apple", lexicon, rng)
    assert s.phase is Phase.WON
    # 'angle' clues differently for 'apple' but is not pruned once the game is over
    assert s.pool == full and "angle" in s.pool
    assert rng.calls == 0
