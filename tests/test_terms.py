from fractions import Fraction

from terms import Polynomial, Term


def test_variable_signature_is_normalised():
    term = Term(3, {"y": 1, "x": 2, "z": 0})
    assert term.variables == (("x", 2), ("y", 1))
    assert term.powers() == {"x": 2, "y": 1}
    assert term.coefficient == Fraction(3)


def test_negate_scale_abs():
    term = Term(-2, {"x": 1})
    assert term.negate() == Term(2, {"x": 1})
    assert term.scale(Fraction(1, 2)) == Term(-1, {"x": 1})
    assert term.abs() == Term(2, {"x": 1})
    assert term.coefficient == -2


def test_multiply_sums_exponents():
    product = Term(2, {"x": 1}).multiply(Term(3, {"x": 1, "y": 1}))
    assert product == Term(6, {"x": 2, "y": 1})


def test_zero_and_positive():
    assert Term(0, {"x": 1}).is_zero()
    assert not Term.constant(1).is_zero()
    assert Term.variable("x").is_positive()
    assert not Term(-1).is_positive()


def test_similarity_ignores_coefficient():
    a = Term(2, {"x": 1, "y": 2})
    b = Term(-5, {"y": 2, "x": 1})
    c = Term(7, {"y": 2, "x": 1})
    assert a.is_similar_to(a)
    assert a.is_similar_to(b) and b.is_similar_to(a)
    assert b.is_similar_to(c) and a.is_similar_to(c)
    assert not a.is_similar_to(Term(2, {"x": 1}))
    assert not Term.constant(4).is_similar_to(Term.variable("x"))


def test_polynomial_equality_ignores_order_and_zeros():
    x = Term.variable("x")
    three = Term.constant(3)
    assert Polynomial((x, three)) == Polynomial((three, x, Term(0)))
    assert Polynomial((x, three)) != Polynomial((x,))
    assert hash(Polynomial((x, three))) == hash(Polynomial((three, x)))


def test_polynomial_add_subtract_simplify():
    x = Term.variable("x")
    poly = Polynomial.zero().add(x).add(Polynomial((x, Term.constant(1)))).subtract(Term.constant(1))
    assert len(poly) == 4
    assert poly.simplify() == Polynomial((Term(2, {"x": 1}),))
