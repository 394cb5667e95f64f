# tests/conftest.py
import os

# Settings are read at import time; point them at SQLite before importing app.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import get_db
from app.main import app


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()


class FailingSession:
    """Stands in for a session whose database is unreachable."""

    def __init__(self):
        self.rolled_back = False

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    add = _fail
    commit = _fail
    execute = _fail

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


@pytest.fixture
def failing_session():
    return FailingSession()


def _client_for(session):
    def _override():
        yield session

    app.dependency_overrides[get_db] = _override
    return TestClient(app)


@pytest.fixture
def client(db_session):
    yield _client_for(db_session)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(failing_session):
    yield _client_for(failing_session)
    app.dependency_overrides.clear()
