from __future__ import annotations

from typing import List, NamedTuple

NUMBER = "NUMBER"
VARIABLE = "VARIABLE"
PLUSMINUS = "PLUSMINUS"
MULTDIV = "MULTDIV"
TERMINATE = "TERMINATE"

DIGITS = "0123456789"


class Token(NamedTuple):
    kind: str
    value: str


END = Token(TERMINATE, "")


class ParseError(ValueError):
    """Raised on the first token that cannot be parsed."""

    def __init__(self, reason: str, token: Token = END):
        super().__init__(reason)
        self.reason = reason
        self.token = token


def tokenize(s: str) -> List[Token]:
    tokens: List[Token] = []
    i = 0
    while i < len(s):
        ch = s[i]
        if ch.isspace():
            i += 1
            continue
        if ch in DIGITS:
            j = i
            while j < len(s) and s[j] in DIGITS:
                j += 1
            if j + 1 < len(s) and s[j] == "." and s[j + 1] in DIGITS:
                j += 1
                while j < len(s) and s[j] in DIGITS:
                    j += 1
            tokens.append(Token(NUMBER, s[i:j]))
            i = j
            continue
        if ch.isalpha():
            tokens.append(Token(VARIABLE, ch))
            i += 1
            continue
        if ch in "+-":
            tokens.append(Token(PLUSMINUS, ch))
            i += 1
            continue
        if ch in "*/":
            tokens.append(Token(MULTDIV, ch))
            i += 1
            continue
        raise ParseError(f"Unexpected character: {ch}", Token("UNKNOWN", ch))
    tokens.append(END)
    return tokens
