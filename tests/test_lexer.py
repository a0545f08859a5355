import pytest

from lexer import MULTDIV, NUMBER, PLUSMINUS, TERMINATE, VARIABLE, ParseError, Token, tokenize


def test_tokenize_kinds():
    assert tokenize("-2*x + 3") == [
        Token(PLUSMINUS, "-"),
        Token(NUMBER, "2"),
        Token(MULTDIV, "*"),
        Token(VARIABLE, "x"),
        Token(PLUSMINUS, "+"),
        Token(NUMBER, "3"),
        Token(TERMINATE, ""),
    ]


def test_adjacent_letters_are_separate_variables():
    assert [t.kind for t in tokenize("2xy")] == [NUMBER, VARIABLE, VARIABLE, TERMINATE]


def test_decimal_literal():
    assert tokenize("2.5")[0] == Token(NUMBER, "2.5")


def test_empty_input_is_just_terminator():
    assert tokenize("   ") == [Token(TERMINATE, "")]


@pytest.mark.parametrize("text", ["(x)", "x^2", "x = 1"])
def test_unsupported_characters_fail(text):
    with pytest.raises(ParseError) as info:
        tokenize(text)
    assert "Unexpected character" in str(info.value)


@pytest.mark.parametrize("text", ["2*²", "x + ³", "٣x"])
def test_non_ascii_digits_fail(text):
    with pytest.raises(ParseError):
        tokenize(text)
