"""Errors carry a position, line and column; the lexer halts on the first one."""

import logging

from lexico import SKIP, ConstructorError, LexError, Lexer, regex


def parse_byte(text: str) -> int:
    value = int(text)
    if value > 255:
        raise ValueError(f"{value} does not fit in a byte")
    return value


logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

pairs = [(parse_byte, regex(r"\d+")), (SKIP, regex(r"[ ,\n]+"))]

for source in ["1, 2, 3", "10, 20,\n300", "7, 8; 9"]:
    lexer = Lexer(source, pairs, source_file="bytes.txt")
    try:
        print([t.kind for t in lexer])
    except ConstructorError as e:
        print(f"bad value: {e} (caused by {e.cause!r})")
    except LexError as e:
        print(f"lexing stopped: {e}")
    print("  halted:", lexer.halted, "at offset", lexer.offset)
