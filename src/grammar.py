from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from lexer import (
    END,
    MULTDIV,
    NUMBER,
    PLUSMINUS,
    TERMINATE,
    VARIABLE,
    ParseError,
    Token,
    tokenize,
)
from terms import Term

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Composite:
    """Product of two sub-expressions, distributed only when simplified."""

    left: "Expr"
    right: "Expr"

    def multiply(self, other: "Expr") -> Composite:
        return Composite(self, other)


@dataclass(frozen=True)
class Sum:
    children: Tuple["Expr", ...] = ()

    def add(self, other: "Expr") -> Sum:
        return Sum(self.children + (other,))


Expr = Union[Term, Composite, Sum]

NEGATIVE_ONE = Term(-1)


def build_product(factors: Sequence[Expr]) -> Expr:
    if not factors:
        raise ValueError("build_product needs at least one factor")
    node = factors[-1]
    for factor in reversed(factors[:-1]):
        node = Composite(factor, node)
    return node


class Parser:
    """LL(1) parser for sums of signed products of numbers and variables.

    expression    -> signed_term sum_op
    sum_op        -> (PLUSMINUS term)*
    signed_term   -> PLUSMINUS? term
    term          -> signed_factor term_op
    term_op       -> (MULTDIV signed_factor | VARIABLE)*
    signed_factor -> PLUSMINUS? factor
    factor        -> NUMBER | VARIABLE
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = list(tokens)
        self.pos = 0

    def peek(self) -> Token:
        if self.pos >= len(self.tokens):
            return END
        return self.tokens[self.pos]

    def lookahead(self) -> str:
        return self.peek().kind

    def consume(self) -> Token:
        tok = self.peek()
        if tok.kind != TERMINATE:
            self.pos += 1
        return tok

    def parse(self) -> Sum:
        result = self.parse_expression()
        if self.lookahead() != TERMINATE:
            tok = self.consume()
            raise ParseError(f"Character ({tok.value}) could not be parsed", tok)
        return result

    def parse_expression(self) -> Sum:
        result = Sum((self.parse_signed_term(),))
        while self.lookahead() == PLUSMINUS:
            tok = self.consume()
            result = result.add(self.parse_term(negate=tok.value == "-"))
        return result

    def parse_signed_term(self) -> Expr:
        kind = self.lookahead()
        if kind == PLUSMINUS:
            tok = self.consume()
            return self.parse_term(negate=tok.value == "-")
        if kind == TERMINATE:
            raise ParseError("String terminated early. Was expecting a term.", self.peek())
        return self.parse_term()

    def parse_term(self, negate: bool = False) -> Expr:
        factors: List[Term] = [self.parse_signed_factor()]
        while True:
            kind = self.lookahead()
            if kind == MULTDIV:
                tok = self.consume()
                if tok.value != "*":
                    raise ParseError("Division is not supported yet.", tok)
                factors.append(self.parse_signed_factor())
            elif kind == VARIABLE:
                factors.append(Term.variable(self.consume().value))
            else:
                break
        if negate:
            factors[0] = factors[0].negate()
        return build_product(factors)

    def parse_signed_factor(self) -> Term:
        kind = self.lookahead()
        if kind == PLUSMINUS:
            tok = self.consume()
            factor = self.parse_factor()
            return factor.negate() if tok.value == "-" else factor
        if kind == TERMINATE:
            raise ParseError(
                "String terminated early. Was expecting a number or variable.", self.peek()
            )
        return self.parse_factor()

    def parse_factor(self) -> Term:
        tok = self.peek()
        if tok.kind == NUMBER:
            self.consume()
            return Term.constant(tok.value)
        if tok.kind == VARIABLE:
            self.consume()
            return Term.variable(tok.value)
        if tok.kind == TERMINATE:
            raise ParseError("String terminated early. Was expecting a number or variable.", tok)
        self.consume()
        raise ParseError("Was expecting a number or variable.", tok)


def parse(tokens: Sequence[Token]) -> Sum:
    tree = Parser(tokens).parse()
    logger.debug("parsed %d tokens into %d summands", len(tokens), len(tree.children))
    return tree


def parse_text(text: str) -> Sum:
    return parse(tokenize(text))
