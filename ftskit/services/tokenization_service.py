from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from sqlalchemy.engine import Engine

from ftskit.core.database import SQLAlchemyDatabase
from ftskit.core.tokenization.config import TokenizerRequest
from ftskit.core.tokenization.statement import render_create_statement
from ftskit.core.tokenization.tokenizer import FTS3Tokenizer
from ftskit.utils.telemetry import step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenizationResult:
    tokenizer: TokenizerRequest
    statement: str  # the CREATE VIRTUAL TABLE text that was executed
    tokens: List[str]


class TokenizationService:
    """
    Runs one-shot tokenizations on connections checked out from an engine.
    - One connection (and transaction) per call
    - Calls are serialized: the ephemeral tokens table has a fixed name
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._lock = threading.Lock()

    def tokenize(self, text: str, tokenizer: TokenizerRequest) -> TokenizationResult:
        statement = render_create_statement(tokenizer)
        with step(
            "tokenize.run", tokenizer=tokenizer.name, input_chars=len(text)
        ) as span:
            with self._lock, self.engine.begin() as conn:
                tokens = FTS3Tokenizer(SQLAlchemyDatabase(conn), tokenizer).tokenize(
                    text
                )
            span.set_attribute("ftskit.token_count", len(tokens))

        logger.info(
            "✅ Tokenized %d chars with %s: %d tokens",
            len(text),
            tokenizer.name,
            len(tokens),
        )
        return TokenizationResult(tokenizer=tokenizer, statement=statement, tokens=tokens)

    def probe(self) -> bool:
        """True when the connected SQLite exposes fts3tokenize."""
        try:
            tokens = self.tokenize("Hello, World!", TokenizerRequest.simple()).tokens
        except Exception as e:
            logger.warning(f"❌ fts3tokenize probe failed - {e}")
            return False
        return tokens == ["hello", "world"]


def build_tokenizer_request(
    name: str = "simple",
    arguments: Optional[Sequence[str]] = None,
    *,
    remove_diacritics: bool = True,
    separators: Iterable[str] = (),
    token_characters: Iterable[str] = (),
) -> TokenizerRequest:
    """Resolve loose caller options into a TokenizerRequest.

    Explicit ``arguments`` (even an empty list) are used verbatim. Otherwise
    ``unicode61`` goes through its factory and the unicode61 options apply;
    any other name gets no arguments.
    """
    if arguments is not None:
        return TokenizerRequest(name, arguments)
    if name == "unicode61":
        return TokenizerRequest.unicode61(
            remove_diacritics=remove_diacritics,
            separators=separators,
            token_characters=token_characters,
        )
    return TokenizerRequest(name)
