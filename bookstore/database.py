"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the BookStore API.

We use SYNCHRONOUS SQLAlchemy. FastAPI runs plain `def` route handlers in
its thread pool, so a request blocked on the database never blocks other
requests.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives -> create a new session
2. Repositories share that session for all operations in the request
3. Repositories commit explicitly; the resource services roll back on failure
4. Close session when request ends

Uncommitted (staged) rows live only inside the request's transaction and
are not visible to other sessions.
"""

import logging
from collections.abc import Generator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookstore.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)


# =============================================================================
# Database Engine
# =============================================================================
# - pool_size / max_overflow: connection pool sizing (not used by SQLite)
# - pool_pre_ping: Test connection health before using
# - echo: Log all SQL statements in debug mode

engine_options: dict = {"echo": settings.debug, "pool_pre_ping": True}
if settings.is_sqlite:
    engine_options["connect_args"] = {"check_same_thread": False}
else:
    engine_options["pool_size"] = settings.db_pool_size
    engine_options["max_overflow"] = settings.db_max_overflow

engine = create_engine(settings.database_url, **engine_options)


def enable_sqlite_foreign_keys(target: Engine) -> None:
    """
    Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores FOREIGN KEY clauses (including ON DELETE CASCADE)
    unless the pragma is set on each connection.
    """

    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


if settings.is_sqlite:
    enable_sqlite_foreign_keys(engine)


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: repositories decide when to commit
# - autoflush=False: Don't auto-flush before queries (more predictable behavior)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover the tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a session, yields it to the route handler and closes it when
    the request ends (the finally block runs even if an exception occurs).

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    WARNING: In production, use Alembic migrations instead!
    """
    logger.info("Creating database tables")
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only use in development and tests.
    """
    logger.warning("Dropping all database tables")
    Base.metadata.drop_all(bind=engine)
