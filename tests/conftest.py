# tests/conftest.py
import os
import tempfile
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from issuedb.db import Database
from issuedb.main import create_app
from issuedb.repositories import RecordStore


# --- Temporary SQLite DB file per test ---
@pytest.fixture
def tmp_db_url():
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    url = f"sqlite:///{path}"
    yield url
    try:
        os.remove(path)
    except OSError:
        pass


@pytest.fixture
def database(tmp_db_url):
    db = Database(tmp_db_url)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    with database.session() as db:
        yield db


@pytest.fixture
def store(db_session):
    return RecordStore(db_session)


@pytest.fixture
def client(database):
    with TestClient(create_app(database)) as c:
        yield c


# --- Seed a few records owned by two users ---
@pytest.fixture
def seed_sample(store, db_session):
    """
    alice owns records 1 and 3, bob owns record 2.
    Records are created in id order, so newest-first is 3, 2, 1.
    """
    db_session.execute(text("DELETE FROM users"))
    db_session.commit()
    return [
        store.create("Alice", "CA", '{"color": "blue"}', "alice"),
        store.create("Bob", "TX", None, "bob"),
        store.create("Alice Again", "NY", "plain", "alice"),
    ]
