from __future__ import annotations

import re
from fractions import Fraction
from typing import Iterable, List

from terms import Term


def format_number(value: Fraction) -> str:
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def format_variables(term: Term) -> str:
    return "".join(name if exp == 1 else f"{name}^{exp}" for name, exp in term.variables)


def format_term(term: Term) -> str:
    """Render a term with its sign, e.g. ``-3x^2y`` or ``x``."""
    sign = "-" if term.coefficient < 0 else ""
    magnitude = abs(term.coefficient)
    variables = format_variables(term)
    if not variables:
        return sign + format_number(magnitude)
    if magnitude == 1:
        return sign + variables
    return sign + format_number(magnitude) + variables


def format_polynomial(terms: Iterable[Term]) -> str:
    parts: List[str] = []
    for term in terms:
        if not parts:
            parts.append(format_term(term))
        elif term.coefficient >= 0:
            parts.append(f"+ {format_term(term)}")
        else:
            parts.append(f"- {format_term(term.abs())}")
    if not parts:
        return "0"
    return " ".join(parts)


def to_latex(text: str) -> str:
    converted = re.sub(r"(-?\d+)/(\d+)", r"\\frac{\1}{\2}", text)
    converted = re.sub(r"\^(\d+)", r"^{\1}", converted)
    return converted
