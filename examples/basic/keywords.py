"""Keywords versus identifiers: table order decides, or ask for the longest match."""

from lexico import SKIP, LexConfig, Lexer, Resolution, lex_config_context, regex

pairs = [
    (SKIP, regex(r"\s+")),
    ("IF", "if"),
    ("IDENT", regex(r"[a-z]+")),
]
source = "if iffy"

# Priority (default): the earlier "if" literal wins even inside "iffy".
print([(t.kind, t.text) for t in Lexer(source, pairs)])

# Longest match: "iffy" is longer than "if", so the identifier wins.
with lex_config_context(LexConfig(resolution=Resolution.LONGEST)):
    print([(t.kind, t.text) for t in Lexer(source, pairs)])

# A word boundary keeps priority resolution and still gets it right.
bounded = [(SKIP, regex(r"\s+")), ("IF", regex(r"if\b")), ("IDENT", regex(r"[a-z]+"))]
print([(t.kind, t.text) for t in Lexer(source, bounded)])
