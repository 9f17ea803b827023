# ftskit/core/database.py
from typing import Any, List, Sequence

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine, Row

from ftskit.core.config import settings
from ftskit.core.tokenization.base import Database


class SQLAlchemyDatabase(Database):
    """Adapter: runs tokenizer statements on a SQLAlchemy connection.

    Statements go through ``exec_driver_sql`` so their text reaches the
    sqlite3 driver as written, with qmark (``?``) parameters.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    def execute(self, statement: str, arguments: Sequence[Any] = ()) -> None:
        self.connection.exec_driver_sql(statement, tuple(arguments) or None)

    def fetch_rows(self, statement: str, arguments: Sequence[Any] = ()) -> List[Row]:
        result = self.connection.exec_driver_sql(statement, tuple(arguments) or None)
        return result.all()


class DatabaseEngine:
    def __init__(self, url: str | None = None):
        self._engine: Engine = create_engine(
            url or settings.DATABASE_URL,
            echo=False,
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_engine(self) -> Engine:
        return self._engine


database = DatabaseEngine()
get_engine = database.get_engine
