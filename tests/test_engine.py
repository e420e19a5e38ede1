import random
from collections import Counter

import pytest

from kanadle.engine import (
    Verdict, evaluate, filter_candidates, is_consistent, is_well_formed, score,
)
from kanadle.session import Attempt

E, P, A = Verdict.EXACT, Verdict.PRESENT, Verdict.ABSENT


# --- golden tests (answer, guess) -> verdicts ---
@pytest.mark.parametrize("answer,guess,expected", [
    ("あいあう", "ああかか", [E, P, A, A]),     # leftmost unconsumed duplicate wins
    ("かまきり", "かまきり", [E, E, E, E]),
    ("さかなや", "ひまわり", [A, A, A, A]),
    ("あさがお", "おあさが", [P, P, P, P]),
    ("たいよう", "いいいい", [A, E, A, A]),     # extra copies of a matched symbol stay absent
    ("ちちおや", "おちちち", [P, E, P, A]),
])
def test_evaluate_golden(answer, guess, expected):
    assert evaluate(answer, guess) == expected


def test_evaluate_accepts_symbol_lists():
    assert evaluate(["あ", "い", "あ", "う"], ["あ", "あ", "か", "か"]) == [E, P, A, A]


def test_evaluate_length_mismatch():
    with pytest.raises(ValueError):
        evaluate("あいう", "あいうえ")


def test_score_pattern():
    assert score("ああかか", "あいあう") == "GY--"
    assert score("かまきり", "かまきり") == "GGGG"


def test_marks_never_exceed_answer_multiplicity():
    rng = random.Random(0)
    alphabet = "あいうか"
    for _ in range(500):
        answer = "".join(rng.choice(alphabet) for _ in range(4))
        guess = "".join(rng.choice(alphabet) for _ in range(4))
        verdicts = evaluate(answer, guess)
        marked = Counter(g for g, v in zip(guess, verdicts) if v is not A)
        have = Counter(answer)
        for sym, n in marked.items():
            assert n <= have[sym]
        assert all(v is E for v in verdicts) == (answer == guess)


def _attempt(guess, answer, index=1):
    return Attempt(index, tuple(guess), tuple(evaluate(answer, guess)))


def test_filter_candidates_keeps_words_matching_the_board():
    words = ["かまきり", "からあげ", "かみなり", "さかなや", "まつたけ"]
    board = [_attempt("からあげ", "かまきり")]
    assert board[0].pattern == "G---"
    assert filter_candidates(words, board, N=4) == ["かまきり", "かみなり"]


def test_filter_candidates_uses_every_attempt():
    words = ["かまきり", "かみなり"]
    board = [_attempt("からあげ", "かみなり", 1), _attempt("かまきり", "かみなり", 2)]
    assert filter_candidates(words, board, N=4) == ["かみなり"]
    assert is_consistent("かみなり", board) and not is_consistent("かまきり", board)


def test_filter_candidates_skips_wrong_length():
    assert filter_candidates(["さくら", "かまきり"], [], N=4) == ["かまきり"]


def test_is_well_formed():
    assert is_well_formed("かまきり", 4)
    assert is_well_formed(["ま", "っ", "た", "け"], 4)
    assert not is_well_formed("さくら", 4)
    assert not is_well_formed("kama", 4)
    assert not is_well_formed(["か", "ま", "き", "りり"], 4)
