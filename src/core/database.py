"""Database connection and session management.

This module handles the database connection using SQLAlchemy and provides the
guard that turns storage errors into ``STORAGE_FAILURE`` results.
"""

import functools
import logging
from typing import Callable, TypeVar

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config import DATA_DIR, DATABASE_URL
from core.result import Err, ErrorKind
from models.base import Base
# Import models to ensure they are registered with Base.metadata
import models  # noqa: F401

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)

STORAGE_FAILURE_MESSAGE = "Internal server error"


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        # One shared connection, otherwise every session sees an empty database
        kwargs["poolclass"] = StaticPool
    elif url.startswith(f"sqlite:///{DATA_DIR}"):
        DATA_DIR.mkdir(parents=True, exist_ok=True)
    return kwargs


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    Base.metadata.create_all(bind=engine)


# Initialize DB (create tables if not exist)
init_db()


def get_db():
    """Dependency for getting a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def storage_guard(method: F) -> F:
    """Turn SQLAlchemy errors raised by a manager method into a result.

    The decorated method must belong to an object with a ``db`` session. The
    session is rolled back and the error is logged with its traceback; the
    caller only sees ``Err(STORAGE_FAILURE)``.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(
                "Storage failure in %s.%s", type(self).__name__, method.__name__
            )
            return Err(ErrorKind.STORAGE_FAILURE, STORAGE_FAILURE_MESSAGE)

    return wrapper  # type: ignore[return-value]
