from dataclasses import FrozenInstanceError

import pytest

from ftskit.core.tokenization.config import TokenizerRequest


def test_simple_and_porter_have_no_arguments():
    assert TokenizerRequest.simple() == TokenizerRequest("simple", ())
    assert TokenizerRequest.porter() == TokenizerRequest("porter", ())


def test_constructor_keeps_name_and_argument_order():
    request = TokenizerRequest("custom", ["c", "a", "b"])
    assert request.name == "custom"
    assert request.arguments == ("c", "a", "b")


def test_constructor_accepts_any_text():
    request = TokenizerRequest("", ['x"y', "(", ""])
    assert request.arguments == ('x"y', "(", "")


def test_request_is_immutable_and_hashable():
    request = TokenizerRequest("custom", ["a"])
    with pytest.raises(FrozenInstanceError):
        request.name = "other"
    assert {request, TokenizerRequest("custom", ("a",))} == {request}


def test_unicode61_defaults_emit_no_arguments():
    assert TokenizerRequest.unicode61() == TokenizerRequest("unicode61")


def test_unicode61_keep_diacritics():
    assert TokenizerRequest.unicode61(remove_diacritics=False).arguments == (
        "remove_diacritics=0",
    )


def test_unicode61_separators_sorted_by_code_point():
    request = TokenizerRequest.unicode61(separators={";", ","})
    assert request.arguments == ("separators=,;",)


def test_unicode61_arguments_order():
    request = TokenizerRequest.unicode61(
        remove_diacritics=False, separators="x", token_characters="-_"
    )
    assert request.arguments == (
        "remove_diacritics=0",
        "separators=x",
        "tokenchars=-_",
    )


def test_unicode61_character_sets_are_deduplicated():
    request = TokenizerRequest.unicode61(token_characters=["--", "_", "-"])
    assert request.arguments == ("tokenchars=-_",)


def test_unicode61_is_deterministic():
    first = TokenizerRequest.unicode61(separators=set("zyx,;.!"))
    second = TokenizerRequest.unicode61(separators=list(reversed("zyx,;.!")))
    assert first == second
    assert first.arguments == ("separators=!,.;xyz",)


def test_unicode61_passes_equals_and_parentheses_through():
    request = TokenizerRequest.unicode61(token_characters="=()")
    assert request.arguments == ("tokenchars=()=",)


def test_unicode61_doubles_double_quotes():
    request = TokenizerRequest.unicode61(separators='"', token_characters='-"')
    assert request.arguments == ('separators=""', 'tokenchars=""-')


def test_to_dict():
    assert TokenizerRequest.unicode61(remove_diacritics=False).to_dict() == {
        "name": "unicode61",
        "arguments": ["remove_diacritics=0"],
    }
