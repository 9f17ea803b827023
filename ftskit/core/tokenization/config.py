from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple


def _sorted_characters(chars: Iterable[str]) -> str:
    # every character of every element, deduplicated, in code point order
    pool = set()
    for item in chars:
        pool.update(str(item))
    return "".join(sorted(pool))


def _quote_safe(chars: str) -> str:
    # a double quote inside a double-quoted argument is written twice
    return chars.replace('"', '""')


@dataclass(frozen=True)
class TokenizerRequest:
    """An FTS3/FTS4 tokenizer: a name and its ordered arguments.

    Use the ``simple()``, ``porter()`` and ``unicode61()`` factories for
    the tokenizers built into SQLite, or the constructor for a custom
    tokenizer registered with the connection.

    See https://www.sqlite.org/fts3.html#tokenizer
    """

    name: str
    arguments: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "arguments", tuple(self.arguments))

    @classmethod
    def simple(cls) -> "TokenizerRequest":
        """The "simple" tokenizer: ASCII case folding, non-alphanumerics split."""
        return cls("simple")

    @classmethod
    def porter(cls) -> "TokenizerRequest":
        """The "porter" tokenizer: simple tokenizer plus Porter stemming."""
        return cls("porter")

    @classmethod
    def unicode61(
        cls,
        remove_diacritics: bool = True,
        separators: Iterable[str] = (),
        token_characters: Iterable[str] = (),
    ) -> "TokenizerRequest":
        """The "unicode61" tokenizer.

        - remove_diacritics: if True (the default), SQLite strips diacritics
          from latin characters.
        - separators: unless empty (the default), SQLite considers these
          characters as token separators.
        - token_characters: unless empty (the default), SQLite considers
          these characters as token characters.

        Characters are emitted sorted by code point, so a given
        configuration always produces the same arguments.
        """
        arguments: List[str] = []
        if not remove_diacritics:
            arguments.append("remove_diacritics=0")
        seps = _sorted_characters(separators)
        if seps:
            arguments.append("separators=" + _quote_safe(seps))
        tokenchars = _sorted_characters(token_characters)
        if tokenchars:
            arguments.append("tokenchars=" + _quote_safe(tokenchars))
        return cls("unicode61", arguments)

    def to_dict(self) -> dict:
        return {"name": self.name, "arguments": list(self.arguments)}
