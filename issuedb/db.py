from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

Base = declarative_base()


def _begin_immediate(engine: Engine) -> None:
    """
    Make every SQLite transaction start with BEGIN IMMEDIATE.

    pysqlite defers BEGIN until the first write, so a read-check-write would
    only take the write lock after the check. IMMEDIATE takes it up front and
    concurrent writers queue on the busy timeout instead.
    """
    @event.listens_for(engine, "connect")
    def _connect(dbapi_connection, connection_record):
        # let SQLAlchemy emit BEGIN itself
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


class Database:
    """
    Owns the engine and session factory for one store.

    Construct one per process entry point (CLI run, API app, test) and pass
    it to whoever needs sessions; there is no module-level connection.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.engine = create_engine(url, future=True, echo=echo, connect_args=connect_args)
        if self.engine.dialect.name == "sqlite":
            _begin_immediate(self.engine)
        self.SessionLocal = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False, future=True
        )

    def create_all(self) -> None:
        """Create tables and indexes if they don't exist."""
        # registers the models on Base.metadata
        from issuedb import models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Scoped session: closed on every exit path, rolled back if left open."""
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """FastAPI dependency: one session per request from the app's Database."""
    database: Database = request.app.state.database
    with database.session() as db:
        yield db
