from __future__ import annotations

import logging
import os
from typing import List

from grammar import parse_text
from lexer import ParseError
from render import format_polynomial
from simplifier import expand, fold_terms

LOG_LEVEL_ENV = "POLYSIMP_LOG_LEVEL"


def append_unique(lines: List[str], value: str) -> None:
    if not lines or lines[-1] != value:
        lines.append(value)


def simplify_steps(input_str: str) -> List[str]:
    tree = parse_text(input_str)
    terms = expand(tree)
    lines: List[str] = []
    append_unique(lines, format_polynomial(terms))
    append_unique(lines, format_polynomial(fold_terms(terms)))
    return lines


def run_line(line: str) -> None:
    try:
        steps = simplify_steps(line)
    except ParseError as exc:
        print(f"Parse error: {exc}")
        return

    for i, step in enumerate(steps, start=1):
        print(f"Step {i}: {step}")


def main() -> None:
    logging.basicConfig(level=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    print("Enter expressions, one per line (end with empty line):")
    while True:
        try:
            line = input()
        except EOFError:
            break
        if not line.strip():
            break
        run_line(line.strip())


if __name__ == "__main__":
    main()
