from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, Iterator, Mapping, Tuple, Union

Signature = Tuple[Tuple[str, int], ...]
Number = Union[int, Fraction]


def _signature(variables: Mapping[str, int] | Iterable[Tuple[str, int]]) -> Signature:
    pairs = variables.items() if isinstance(variables, Mapping) else variables
    powers: dict[str, int] = {}
    for name, exp in pairs:
        powers[name] = powers.get(name, 0) + int(exp)
    return tuple(sorted((name, exp) for name, exp in powers.items() if exp != 0))


@dataclass(frozen=True)
class Term:
    """A monomial: coefficient times a product of variable powers."""

    coefficient: Fraction
    variables: Signature = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "coefficient", Fraction(self.coefficient))
        object.__setattr__(self, "variables", _signature(self.variables))

    @classmethod
    def constant(cls, value: Number | str) -> Term:
        return cls(Fraction(value))

    @classmethod
    def variable(cls, name: str) -> Term:
        return cls(Fraction(1), ((name, 1),))

    def powers(self) -> dict[str, int]:
        return dict(self.variables)

    def negate(self) -> Term:
        return Term(-self.coefficient, self.variables)

    def scale(self, k: Number) -> Term:
        return Term(self.coefficient * k, self.variables)

    def multiply(self, other: Term) -> Term:
        return Term(self.coefficient * other.coefficient, self.variables + other.variables)

    def abs(self) -> Term:
        return Term(abs(self.coefficient), self.variables)

    def is_zero(self) -> bool:
        return self.coefficient == 0

    def is_positive(self) -> bool:
        return self.coefficient > 0

    def is_similar_to(self, other: Term) -> bool:
        return self.variables == other.variables


@dataclass(frozen=True, eq=False)
class Polynomial:
    """An ordered sum of terms.

    Only the result of ``simplify`` is canonical (no zero terms, no two
    similar terms). Equality ignores term order and zero terms.
    """

    terms: Tuple[Term, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", tuple(self.terms))

    @classmethod
    def zero(cls) -> Polynomial:
        return cls(())

    def add(self, other: Term | Polynomial) -> Polynomial:
        if isinstance(other, Polynomial):
            return Polynomial(self.terms + other.terms)
        return Polynomial(self.terms + (other,))

    def subtract(self, term: Term) -> Polynomial:
        return self.add(term.negate())

    def simplify(self) -> Polynomial:
        # Local import, simplifier depends on this module.
        from simplifier import simplify

        return simplify(self)

    def _key(self) -> Counter:
        return Counter(t for t in self.terms if not t.is_zero())

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(frozenset(self._key().items()))
