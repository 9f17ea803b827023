from ftskit.core.tokenization.config import TokenizerRequest
from ftskit.core.tokenization.statement import (
    DROP_TOKENS_STATEMENT,
    SELECT_TOKENS_STATEMENT,
    render_create_statement,
    render_tokenizer_clause,
)


def test_name_only_is_unquoted():
    assert (
        render_create_statement(TokenizerRequest.simple())
        == "CREATE VIRTUAL TABLE __fts3tokens USING fts3tokenize(simple)"
    )


def test_arguments_are_quoted_in_order():
    request = TokenizerRequest("custom", ["a", "b", "c"])
    assert render_tokenizer_clause(request) == 'custom, "a", "b", "c"'


def test_unicode61_clause():
    request = TokenizerRequest.unicode61(
        remove_diacritics=False, separators={",", ";"}, token_characters="-"
    )
    assert render_create_statement(request) == (
        "CREATE VIRTUAL TABLE __fts3tokens USING fts3tokenize("
        'unicode61, "remove_diacritics=0", "separators=,;", "tokenchars=-")'
    )


def test_arguments_are_inserted_verbatim():
    request = TokenizerRequest("custom", ['a"b', "c=(d)"])
    assert render_tokenizer_clause(request) == 'custom, "a"b", "c=(d)"'


def test_rendering_is_repeatable():
    request = TokenizerRequest.unicode61(separators=set(".,;:!?"))
    assert render_create_statement(request) == render_create_statement(
        TokenizerRequest.unicode61(separators=set("?!:;,."))
    )


def test_companion_statements_target_the_tokens_table():
    assert SELECT_TOKENS_STATEMENT == (
        "SELECT token FROM __fts3tokens WHERE input = ? ORDER BY position"
    )
    assert DROP_TOKENS_STATEMENT == "DROP TABLE __fts3tokens"
