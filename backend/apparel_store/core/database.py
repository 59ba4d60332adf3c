"""
Relational database access (SQLAlchemy)

This module centralizes the database wiring for the whole application:
- Engine and session factory
- Declarative Base for the ORM models
- FastAPI dependency that opens one session per request
- Transaction boundary used by the service layer
"""
import logging
import time
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)


# ============================================================================
# SQLAlchemy Configuration
# ============================================================================

def build_engine(database_url: str, echo: bool = False):
    """
    Create a SQLAlchemy engine for the given URL

    SQLite needs check_same_thread disabled because sync endpoints run on
    the server's worker thread pool. Server databases get a connection pool.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,  # Verify connection before use
        pool_size=10,  # Connections kept in the pool
        max_overflow=20,  # Extra connections when needed
    )


# SQLAlchemy Engine
engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

# Session Factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base for models
Base = declarative_base()


def get_db() -> Iterator[Session]:
    """
    FastAPI dependency that provides a SQLAlchemy session

    Usage:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Unit of work for one service-level operation

    Commits when the block finishes, rolls back and re-raises on any error,
    so partial writes of one logical operation are never persisted.

    Example:
        with transaction(self.db):
            self.apparel_repository.insert(apparel)
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def init_db(bind=None) -> None:
    """
    Create all tables for the registered models

    Args:
        bind: Engine to use (defaults to the application engine)
    """
    # Import models so they register on Base.metadata
    from apparel_store import models  # noqa: F401

    target = bind or engine
    logger.info(f"Creating database schema on {target.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=target)


def check_database_connection() -> float:
    """
    Run a trivial query against the database

    Returns:
        Query latency in milliseconds

    Raises:
        sqlalchemy.exc.SQLAlchemyError if the database is unreachable
    """
    start = time.time()
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    return round((time.time() - start) * 1000, 2)
