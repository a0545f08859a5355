from fractions import Fraction

from render import format_number, format_polynomial, format_term, to_latex
from simplifier import simplify_text
from terms import Term


def test_format_number():
    assert format_number(Fraction(4)) == "4"
    assert format_number(Fraction(-3, 4)) == "-3/4"


def test_format_term():
    assert format_term(Term(1, {"x": 1})) == "x"
    assert format_term(Term(-1, {"x": 1})) == "-x"
    assert format_term(Term(-3, {"x": 2, "y": 1})) == "-3x^2y"
    assert format_term(Term.constant(7)) == "7"


def test_format_polynomial():
    assert format_polynomial(simplify_text("-2*x + 3")) == "-2x + 3"
    assert format_polynomial(simplify_text("x + 1 - 4y")) == "x + 1 - 4y"
    assert format_polynomial(simplify_text("x - x")) == "0"


def test_to_latex():
    assert to_latex("3/4x^12") == r"\frac{3}{4}x^{12}"


def test_zero_coefficient_keeps_plus_sign():
    assert format_polynomial([Term.constant(1), Term(0, {"x": 1})]) == "1 + 0x"
