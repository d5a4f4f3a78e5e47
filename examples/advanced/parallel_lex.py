"""Free-threading safe: one immutable table shared by many lexers."""

from concurrent.futures import ThreadPoolExecutor

from lexico import SKIP, MatcherTableBuilder, regex

table = (
    MatcherTableBuilder()
    .skip(regex(r"\s+"))
    .token("NUMBER", regex(r"\d+"))
    .token("NAME", regex(r"[a-z_]\w*"))
    .token("OP", regex(r"[-+*/=]"))
    .build()
)

docs = [f"x{i} = {i} * y + {i * 2}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(table.lex, docs))

print(f"Lexed {len(results)} documents in parallel")
print("Tokens per doc:", len(results[0]))
print("Last doc:", [t.text for t in results[-1]])
