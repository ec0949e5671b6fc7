"""
Employee Registry Backend: Database Session Management
=========================================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       FastAPI session dependency.
How:   One engine per process with a connection pool. Each request gets its
       own AsyncSession; the dependency commits when the handler returns and
       rolls back when it raises.
Who:   `app.routes` (via Depends), `app.routes.health`, Alembic and tests.

Connection Pooling:
    pool_size=20 + max_overflow=10 keeps us at 30 connections at most, well
    under PostgreSQL's default max_connections=100. SQLite (used by the test
    suite) gets SQLAlchemy's default pool because it rejects these arguments
    for some URL forms.
"""

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings
from app.exceptions import DatabaseError

logger = logging.getLogger(__name__)


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {
        # SQL echo is noisy; only useful when debugging locally
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine ────────────────────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: created records are serialized after the commit
# in get_db_session, so their attributes must stay loaded.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Shares one MetaData object, which Alembic reads for autogenerate.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency providing one database session per request.

    Flow:
        1. Open a session from the factory
        2. Yield it to the handler (via the repository dependency)
        3. Commit if the handler returned normally
        4. Roll back and re-raise if the handler failed
        5. Roll back and raise DatabaseError if the commit itself failed
        6. Close the session, returning the connection to the pool

    Example:
        @router.get("/employees")
        async def list_employees(db: AsyncSession = Depends(get_db_session)):
            ...

    Raises:
        Whatever the handler raised, or DatabaseError for a failed commit.
        The global exception handlers in app.main turn either into an HTTP
        response.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            # Roll back for any failure, including non-DB bugs after a flush
            await session.rollback()
            raise
        try:
            await session.commit()
        except (SQLAlchemyError, OSError) as e:
            logger.error("Commit failed: %s", str(e))
            await session.rollback()
            raise DatabaseError(
                context={"operation": "commit", "error_type": type(e).__name__},
            ) from e
        finally:
            await session.close()


async def dispose_engine() -> None:
    """Closes every pooled connection. Called from the lifespan shutdown."""
    await engine.dispose()
