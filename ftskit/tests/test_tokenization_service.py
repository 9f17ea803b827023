import pytest
from sqlalchemy.exc import DBAPIError

from ftskit.core.tokenization.config import TokenizerRequest
from ftskit.services.tokenization_service import (
    TokenizationService,
    build_tokenizer_request,
)


def test_tokenize_returns_tokens_and_statement(engine):
    service = TokenizationService(engine)
    result = service.tokenize("Hello, World!", TokenizerRequest.simple())

    assert result.tokens == ["hello", "world"]
    assert result.tokenizer == TokenizerRequest.simple()
    assert result.statement == (
        "CREATE VIRTUAL TABLE __fts3tokens USING fts3tokenize(simple)"
    )


def test_tokenize_rejected_tokenizer_propagates(engine):
    service = TokenizationService(engine)
    with pytest.raises(DBAPIError):
        service.tokenize("foo", TokenizerRequest("no_such_tokenizer"))
    # the engine is still usable afterwards
    assert service.tokenize("foo", TokenizerRequest.porter()).tokens == ["foo"]


def test_probe(engine):
    assert TokenizationService(engine).probe() is True


def test_build_simple_by_name():
    assert build_tokenizer_request("simple") == TokenizerRequest.simple()
    assert build_tokenizer_request("porter") == TokenizerRequest.porter()


def test_build_unicode61_from_options():
    request = build_tokenizer_request(
        "unicode61", remove_diacritics=False, separators=";,", token_characters="-"
    )
    assert request == TokenizerRequest.unicode61(
        remove_diacritics=False, separators={",", ";"}, token_characters={"-"}
    )


def test_build_explicit_arguments_win():
    request = build_tokenizer_request(
        "unicode61", [], remove_diacritics=False, separators=";"
    )
    assert request == TokenizerRequest("unicode61")

    request = build_tokenizer_request("custom", ["b", "a"])
    assert request.arguments == ("b", "a")


def test_build_ignores_unicode61_options_for_other_tokenizers():
    assert build_tokenizer_request("porter", separators="x") == TokenizerRequest(
        "porter"
    )
