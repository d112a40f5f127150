"""
Database engine, session factory and transaction helpers.
"""
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import get_settings
from .logging_config import db_logger

settings = get_settings()

connect_args = {}
if settings.database_url.startswith("sqlite"):
    # SQLite connections are shared with FastAPI's threadpool
    connect_args["check_same_thread"] = False

engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db() -> Iterator[Session]:
    """Yield a database session for one request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Run a read-check-write sequence as one unit of work.

    Commits when the block exits normally; rolls back and re-raises otherwise.
    """
    try:
        yield db
        db.commit()
    except Exception as e:
        db.rollback()
        db_logger.warning("Transaction rolled back", error_type=type(e).__name__)
        raise
