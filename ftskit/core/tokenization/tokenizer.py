from __future__ import annotations
import logging
from typing import List

from ftskit.core.tokenization.base import Database, Tokenizer
from ftskit.core.tokenization.config import TokenizerRequest
from ftskit.core.tokenization.statement import (
    DROP_TOKENS_STATEMENT,
    SELECT_TOKENS_STATEMENT,
    render_create_statement,
)

logger = logging.getLogger(__name__)


class FTS3Tokenizer(Tokenizer):
    """Adapter: asks SQLite's fts3tokenize module for the tokens of a string.

    Each call creates the ephemeral tokens table, reads it, and drops it
    again. Only one call may run at a time on a given session.
    """

    def __init__(self, db: Database, tokenizer: TokenizerRequest | None = None):
        self.db = db
        self.request = tokenizer or TokenizerRequest.simple()

    def tokenize(self, text: str) -> List[str]:
        statement = render_create_statement(self.request)
        logger.debug("Creating tokens table: %s", statement)
        self.db.execute(statement)

        try:
            rows = self.db.fetch_rows(SELECT_TOKENS_STATEMENT, (text,))
            tokens = [row[0] for row in rows]
        except Exception:
            # the query failure is the one reported; a failing drop is logged
            try:
                self.db.execute(DROP_TOKENS_STATEMENT)
            except Exception:
                logger.exception(
                    "Could not drop tokens table after a failed query (%s)",
                    self.request.name,
                )
            raise

        self.db.execute(DROP_TOKENS_STATEMENT)
        return tokens


def tokenize(
    db: Database, text: str, tokenizer: TokenizerRequest | None = None
) -> List[str]:
    """Returns the tokens found in ``text``.

        tokenize(db, "foo bar", TokenizerRequest.simple())  # ["foo", "bar"]
    """
    return FTS3Tokenizer(db, tokenizer).tokenize(text)
