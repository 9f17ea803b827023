from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, List, Sequence


class Database(ABC):
    """Port: the storage-engine session a tokenizer runs against."""

    @abstractmethod
    def execute(self, statement: str, arguments: Sequence[Any] = ()) -> None: ...

    @abstractmethod
    def fetch_rows(
        self, statement: str, arguments: Sequence[Any] = ()
    ) -> List[Sequence[Any]]:
        """
        Returns every row of the statement, in order. Rows are indexable
        by column position.
        """
        ...


class Tokenizer(ABC):
    """Port: split a string into the list of tokens a full-text index stores."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]: ...
