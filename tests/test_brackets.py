from __future__ import annotations

import pytest

from syntax_scoring.brackets import (
    CLOSING_CHARS,
    OPENING_CHARS,
    Bracket,
)


@pytest.mark.parametrize(
    "bracket, opening, closing",
    [
        (Bracket.ROUND, "(", ")"),
        (Bracket.SQUARE, "[", "]"),
        (Bracket.CURLY, "{", "}"),
        (Bracket.ANGLE, "<", ">"),
    ],
)
def test_bracket_characters_round_trip(bracket, opening, closing):
    assert bracket.opening == opening
    assert bracket.closing == closing
    assert Bracket.from_opening(opening) is bracket
    assert Bracket.from_closing(closing) is bracket


def test_opening_and_closing_sets_are_disjoint():
    assert set(OPENING_CHARS).isdisjoint(CLOSING_CHARS)
    assert len(OPENING_CHARS) == len(CLOSING_CHARS) == 4


@pytest.mark.parametrize("ch", ["a", " ", "", "|", "\n"])
def test_unknown_characters_are_not_brackets(ch):
    assert Bracket.from_opening(ch) is None
    assert Bracket.from_closing(ch) is None


def test_opening_char_is_not_a_closing_char():
    assert Bracket.from_closing("(") is None
    assert Bracket.from_opening(")") is None
    assert Bracket.from_opening("<") is Bracket.ANGLE
