import argparse
import json
import logging
import sys

from sqlalchemy.exc import DBAPIError

from ftskit.core.config import settings
from ftskit.core.database import DatabaseEngine
from ftskit.middlewares.logging import setup_logging
from ftskit.services.tokenization_service import (
    TokenizationService,
    build_tokenizer_request,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the tokens SQLite's full-text engine extracts from TEXT"
    )
    parser.add_argument("text", type=str, help="Text to tokenize")
    parser.add_argument(
        "--tokenizer",
        type=str,
        default="simple",
        help="Tokenizer name (simple, porter, unicode61 or a custom one)",
    )
    parser.add_argument(
        "--argument",
        dest="arguments",
        action="append",
        default=None,
        help="Raw tokenizer argument, repeatable; disables the unicode61 options",
    )
    parser.add_argument(
        "--keep-diacritics",
        action="store_true",
        help="unicode61: do not strip diacritics",
    )
    parser.add_argument(
        "--separators", type=str, default="", help="unicode61: extra separators"
    )
    parser.add_argument(
        "--token-characters",
        type=str,
        default="",
        help="unicode61: extra token characters",
    )
    parser.add_argument(
        "--database-url",
        type=str,
        default=settings.DATABASE_URL,
        help="SQLAlchemy URL of the SQLite database to run against",
    )
    parser.add_argument(
        "--show-statement",
        action="store_true",
        help="Print the CREATE VIRTUAL TABLE statement before the tokens",
    )
    parser.add_argument("--json", action="store_true", help="Print tokens as JSON")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.WARNING, stream=sys.stderr)

    tokenizer = build_tokenizer_request(
        args.tokenizer,
        args.arguments,
        remove_diacritics=not args.keep_diacritics,
        separators=args.separators,
        token_characters=args.token_characters,
    )
    service = TokenizationService(DatabaseEngine(args.database_url).engine)

    try:
        result = service.tokenize(args.text, tokenizer)
    except DBAPIError as e:
        logger.error(f"Tokenizer {tokenizer.name} rejected: {e.orig}")
        return 1

    if args.show_statement:
        print(result.statement)
    if args.json:
        print(json.dumps(result.tokens, ensure_ascii=False))
    else:
        for token in result.tokens:
            print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
