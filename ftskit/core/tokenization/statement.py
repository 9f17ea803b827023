# Statement text for the ephemeral fts3tokenize table.
#
# The creation statement must match SQLite's virtual table syntax exactly:
#   CREATE VIRTUAL TABLE <table> USING fts3tokenize(<name>, "<arg1>", ...)
from __future__ import annotations

from ftskit.core.tokenization.config import TokenizerRequest

TOKENS_TABLE = "__fts3tokens"
TOKENIZE_MODULE = "fts3tokenize"

SELECT_TOKENS_STATEMENT = (
    f"SELECT token FROM {TOKENS_TABLE} WHERE input = ? ORDER BY position"
)
DROP_TOKENS_STATEMENT = f"DROP TABLE {TOKENS_TABLE}"


def render_tokenizer_clause(tokenizer: TokenizerRequest) -> str:
    """Name first and unquoted, then each argument verbatim in double quotes."""
    chunks = [tokenizer.name]
    for argument in tokenizer.arguments:
        chunks.append(f'"{argument}"')
    return ", ".join(chunks)


def render_create_statement(tokenizer: TokenizerRequest) -> str:
    return (
        f"CREATE VIRTUAL TABLE {TOKENS_TABLE} "
        f"USING {TOKENIZE_MODULE}({render_tokenizer_clause(tokenizer)})"
    )
