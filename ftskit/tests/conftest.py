import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import DBAPIError

from ftskit.core.database import SQLAlchemyDatabase
from ftskit.core.tokenization.config import TokenizerRequest
from ftskit.core.tokenization.statement import (
    DROP_TOKENS_STATEMENT,
    render_create_statement,
)


def _skip_without_fts3tokenize(db: SQLAlchemyDatabase):
    try:
        db.execute(render_create_statement(TokenizerRequest.simple()))
    except DBAPIError as e:
        pytest.skip(f"SQLite build without fts3tokenize: {e.orig}")
    db.execute(DROP_TOKENS_STATEMENT)


@pytest.fixture
def engine():
    engine = create_engine("sqlite://")
    with engine.connect() as conn:
        _skip_without_fts3tokenize(SQLAlchemyDatabase(conn))
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with engine.connect() as conn:
        yield SQLAlchemyDatabase(conn)
