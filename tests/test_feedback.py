"""
Testing feedback scoring.
"""

import itertools

import pytest

from pbf.feedback import Feedback, Secret, compare, compute_feedback, outcome_space
from pbf.solver import GuessState


def test_secret_against_itself_is_all_fermi():
    for s in ["123", "000", "907"]:
        assert compare(s, s) == Feedback(p=0, f=3)


def test_worked_example():
    # secret 123
    assert compare("123", "456") == Feedback(p=0, f=0)
    assert compare("123", "124") == Feedback(p=0, f=2)
    assert compare("123", "312") == Feedback(p=3, f=0)
    assert compare("123", "134") == Feedback(p=1, f=1)


def test_presence_uses_symbol_set():
    # '1' occurs once in the reference but every guessed '1' counts
    assert compare("122", "111") == Feedback(p=2, f=1)
    assert compare("112", "121") == Feedback(p=2, f=1)


def test_reference_and_candidate_are_not_symmetric():
    assert compare("111", "122") == Feedback(p=0, f=1)
    assert compare("122", "111") == Feedback(p=2, f=1)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        compare("123", "12")
    with pytest.raises(ValueError):
        Secret("12").compare("123")


def test_generic_symbols():
    secret = Secret(["red", "green", "blue"])
    assert secret.compare(["green", "green", "pink"]) == Feedback(p=1, f=1)
    assert secret.compare(["blue", "red", "green"]) == Feedback(p=3, f=0)


def test_bounds_hold_for_every_pair():
    n = 3
    seqs = list(itertools.product("012", repeat=n))
    outcomes = set(outcome_space(n))
    for a in seqs:
        secret = Secret(a)
        for b in seqs:
            fb = secret.compare(b)
            assert 0 <= fb.f <= n
            assert 0 <= fb.p <= n - fb.f
            assert fb in outcomes


@pytest.mark.parametrize("fb, text", [
    (Feedback(0, 0), "b"),
    (Feedback(1, 0), "p"),
    (Feedback(1, 2), "ffp"),
    (Feedback(0, 3), "fff"),
])
def test_feedback_notation(fb, text):
    assert str(fb) == text
    assert Feedback.parse(text) == fb


def test_feedback_parse_is_lenient_on_case_and_spaces():
    assert Feedback.parse(" P f ") == Feedback(1, 1)
    assert Feedback.parse("") == Feedback(0, 0)


def test_feedback_parse_rejects_other_characters():
    with pytest.raises(ValueError):
        Feedback.parse("fx")


def test_feedback_encoding():
    for length in [1, 3, 5]:
        codes = set()
        for fb in outcome_space(length):
            code = fb.encode(length)
            assert Feedback.decode(code, length) == fb
            codes.add(code)
        assert len(codes) == len(outcome_space(length))


def test_outcome_space():
    space = outcome_space(3)
    assert len(space) == 10
    assert Feedback(0, 3) in space
    assert Feedback(3, 0) in space
    assert Feedback(1, 3) not in space
    assert len(outcome_space(5)) == 21

    with pytest.raises(ValueError):
        outcome_space(0)


def test_is_solved():
    assert Feedback(0, 3).is_solved(3)
    assert not Feedback(1, 2).is_solved(3)


def test_kernel_agrees_with_secret_compare():
    state = GuessState("abc", 3)
    n = len(state.space)
    for i in range(n):
        secret = Secret(state.alphabet[c] for c in state.space[i])
        for j in range(n):
            guess = [state.alphabet[c] for c in state.space[j]]
            code = compute_feedback(state.space[i], state.presence[i], state.space[j])
            assert Feedback.decode(code, 3) == secret.compare(guess)
