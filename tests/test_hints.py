"""
Testing the hint session text layer.
"""

import pytest

from pbf.feedback import Secret
from pbf.hints import HintSession, example_game, main, parse_digits, render_guess


def test_parse_digits():
    assert parse_digits("123") == (1, 2, 3)
    assert parse_digits(" 907 ") == (9, 0, 7)


def test_parse_digits_rejects_non_digits():
    with pytest.raises(ValueError, match="a is not a digit"):
        parse_digits("12a")


def test_example_game():
    assert example_game() == [
        "789 - b",
        "345 - p",
        "234 - pp",
        "134 - fp",
        "123 - fff (Correct)",
    ]


def test_render_guess_generic_symbols():
    assert render_guess(Secret("abc"), "cab") == "cab - ppp"


def test_session_records_and_renders_guesses():
    session = HintSession()
    session.add_guess("456", "b")
    session.add_guess("124", "ff")
    assert session.render_guesses() == ["456 - b", "124 - ff"]
    assert (1, 2, 3) in session.state.candidates()


def test_session_bad_input_leaves_state_untouched():
    session = HintSession()
    with pytest.raises(ValueError):
        session.add_guess("4x6", "b")
    with pytest.raises(ValueError):
        session.add_guess("456", "bq")
    assert session.render_guesses() == []
    assert len(session.state) == 1000


def test_session_hint_and_reset():
    session = HintSession()
    session.add_guess("123", "fff")
    assert session.hint() == (1, 2, 3)
    assert session.render_hint() == "123"

    session.reset()
    assert session.render_guesses() == []
    assert len(session.state) == 1000


def test_session_reports_contradiction():
    session = HintSession()
    session.add_guess("123", "fff")
    session.add_guess("456", "p")
    assert session.hint() is None
    assert session.render_hint().startswith("No hint available")


def test_session_with_letters():
    session = HintSession(alphabet="ab", length=2)
    session.add_guess("aa", "fp")
    assert session.render_hint() == "ab"


def test_main_loop(monkeypatch, capsys):
    lines = iter(["123 fff", "hint", "oops", "reset", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    main([])
    out = capsys.readouterr().out
    assert "123 - fff" in out
    assert "(1 possible secrets left)" in out
    assert "Error:" in out
    assert "Guesses cleared." in out
