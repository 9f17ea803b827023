from functools import lru_cache
import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError

from ftskit.core.config import settings
from ftskit.core.database import get_engine
from ftskit.core.tokenization.config import TokenizerRequest
from ftskit.core.tokenization.statement import render_create_statement
from ftskit.messages.tokenize_messages import (
    INPUT_INVALID,
    INPUT_TOO_LONG,
    STATEMENT_SUCCESS,
    TOKENIZE_SUCCESS,
    TOKENIZER_REJECTED,
)
from ftskit.middlewares.security import limiter
from ftskit.schemas.tokenize import (
    StatementData,
    StatementRequest,
    StatementResponse,
    TokenizedData,
    TokenizedResponse,
    TokenizeRequest,
    TokenizerData,
    TokenizerOptions,
)
from ftskit.services.tokenization_service import (
    TokenizationService,
    build_tokenizer_request,
)
from ftskit.utils.exceptions import BadRequestError
from ftskit.utils.response_builder import success_response

router = APIRouter(prefix="/api/tokenize", tags=["Tokenize"])
logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _service_for(engine: Engine) -> TokenizationService:
    # the service (and its lock) of the current engine, shared by every request
    return TokenizationService(engine)


def get_tokenization_service(
    engine: Engine = Depends(get_engine),
) -> TokenizationService:
    return _service_for(engine)


def _resolve(options: TokenizerOptions) -> TokenizerRequest:
    return build_tokenizer_request(
        options.name,
        options.arguments,
        remove_diacritics=options.remove_diacritics,
        separators=options.separators,
        token_characters=options.token_characters,
    )


def _tokenizer_data(tokenizer: TokenizerRequest) -> TokenizerData:
    return TokenizerData(**tokenizer.to_dict())


@router.post("", response_model=TokenizedResponse)
@limiter.limit(lambda: settings.TOKENIZE_RATE_LIMIT)
def tokenize_text(
    request: Request,
    payload: TokenizeRequest,
    service: TokenizationService = Depends(get_tokenization_service),
):
    if len(payload.text) > settings.MAX_INPUT_LENGTH:
        raise BadRequestError(
            code="INPUT_TOO_LONG",
            message=INPUT_TOO_LONG.format(limit=settings.MAX_INPUT_LENGTH),
        )
    try:
        payload.text.encode("utf-8")
    except UnicodeEncodeError:
        raise BadRequestError(code="INPUT_INVALID", message=INPUT_INVALID)

    tokenizer = _resolve(payload.tokenizer)
    try:
        result = service.tokenize(payload.text, tokenizer)
    except DBAPIError as e:
        logger.warning("❌ Tokenizer %s rejected: %s", tokenizer.name, e.orig)
        raise BadRequestError(
            code="TOKENIZER_REJECTED", message=f"{TOKENIZER_REJECTED} {e.orig}"
        )

    return success_response(
        message=TOKENIZE_SUCCESS,
        data=TokenizedData(
            tokenizer=_tokenizer_data(result.tokenizer),
            statement=result.statement,
            tokens=result.tokens,
            token_count=len(result.tokens),
        ),
    )


@router.post("/statement", response_model=StatementResponse)
@limiter.limit(lambda: settings.TOKENIZE_RATE_LIMIT)
def render_statement(request: Request, payload: StatementRequest):
    tokenizer = _resolve(payload.tokenizer)
    return success_response(
        message=STATEMENT_SUCCESS,
        data=StatementData(
            tokenizer=_tokenizer_data(tokenizer),
            statement=render_create_statement(tokenizer),
        ),
    )
