from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI

from issuedb.db import Database
from issuedb.routers.submissions import router as submissions_router
from issuedb.routers.read import router as read_router
from issuedb.settings import DATABASE_URL
from issuedb.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the API around one Database. Tests pass their own; the served
    app gets one from settings.
    """
    database = database or Database(DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context runs once at startup and once at shutdown.
        Tables are created on startup; connections are released on shutdown.
        """
        database.create_all()
        yield
        database.dispose()

    app = FastAPI(title="Issue-driven record store", lifespan=lifespan)
    app.state.database = database

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/healthz")
    def health():
        """Simple health probe for monitoring."""
        return {"ok": True, "service": "issuedb", "version": 1}

    # Register API routers:
    app.include_router(submissions_router)
    app.include_router(read_router)
    return app


app = create_app()
