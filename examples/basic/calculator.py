"""Tokenize arithmetic with an enum, a dataclass and a skip pattern."""

from dataclasses import dataclass
from enum import Enum

from lexico import SKIP, lex, regex


class Op(Enum):
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDE = "/"
    LPAREN = "("
    RPAREN = ")"


@dataclass(frozen=True)
class Integer:
    value: int


matchers = [(SKIP, regex(r"\s+"))]
matchers += [(op, op.value) for op in Op]
matchers += [(lambda text: Integer(int(text)), regex(r"\d+"))]

for token in lex("(1 + 23) * 456", matchers):
    print(f"{token.lineno}:{token.col:<3} {token.kind}")
