from __future__ import annotations

import logging
from dataclasses import dataclass, field
from fractions import Fraction
from typing import List, Tuple, Union

from grammar import NEGATIVE_ONE, Composite, Expr, Sum, parse_text
from terms import Polynomial, Signature, Term

logger = logging.getLogger(__name__)

Simplifiable = Union[Expr, Polynomial]


def expand(expr: Simplifiable) -> List[Term]:
    """Distribute every product, leaving a flat list of terms.

    Iterative, so factor chains of any depth are expanded.
    """
    results: List[List[Term]] = []
    stack: List[Tuple[Simplifiable, bool]] = [(expr, False)]
    while stack:
        node, visited = stack.pop()
        if isinstance(node, Term):
            results.append([node])
        elif isinstance(node, Polynomial):
            results.append(list(node.terms))
        elif isinstance(node, Sum):
            if visited:
                start = len(results) - len(node.children)
                out: List[Term] = []
                for part in results[start:]:
                    out.extend(part)
                del results[start:]
                results.append(out)
            else:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children))
        elif isinstance(node, Composite):
            if visited:
                right = results.pop()
                left = results.pop()
                results.append([l.multiply(r) for l in left for r in right])
            else:
                stack.extend([(node, True), (node.right, False), (node.left, False)])
        else:
            raise TypeError(f"Cannot simplify {type(node).__name__}")
    return results[0]


@dataclass
class SimilarTermGroup:
    representative: Term
    terms: List[Term] = field(default_factory=list)

    @property
    def signature(self) -> Signature:
        return self.representative.variables

    def accepts(self, term: Term) -> bool:
        return self.representative.is_similar_to(term)

    def fold(self) -> Term:
        return Term(sum((t.coefficient for t in self.terms), Fraction(0)), self.signature)


def group_terms(terms: List[Term]) -> List[SimilarTermGroup]:
    groups: List[SimilarTermGroup] = []
    for term in terms:
        for group in groups:
            if group.accepts(term):
                group.terms.append(term)
                break
        else:
            groups.append(SimilarTermGroup(term, [term]))
    return groups


def fold_terms(terms: List[Term]) -> Polynomial:
    groups = group_terms(terms)
    folded = [group.fold() for group in groups]
    result = Polynomial(tuple(t for t in folded if not t.is_zero()))
    logger.debug("folded %d terms into %d groups, %d non-zero", len(terms), len(groups), len(result))
    return result


def simplify(expr: Simplifiable) -> Polynomial:
    return fold_terms(expand(expr))


def simplify_text(text: str) -> Polynomial:
    return simplify(parse_text(text))


class Accumulator:
    """Collects terms and expressions, folding them on demand."""

    def __init__(self) -> None:
        self.terms: List[Term] = []

    def add(self, expr: Simplifiable) -> None:
        self.terms.extend(expand(expr))

    def subtract(self, expr: Simplifiable) -> None:
        self.add(Composite(Sum(tuple(expand(expr))), NEGATIVE_ONE))

    def evaluate(self) -> Polynomial:
        result = fold_terms(self.terms)
        self.terms = list(result.terms)
        return result

    def clear(self) -> None:
        self.terms = []
