# barbershop/db.py

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine

from .config import DATABASE_URL, SQL_ECHO
from .errors import RepositoryError

logger = logging.getLogger(__name__)


def _connect_args(url: str) -> dict:
    # required for SQLite + FastAPI threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


# Engine = connection pool to the database
engine = create_engine(
    DATABASE_URL,
    echo=SQL_ECHO,
    pool_pre_ping=True,
    connect_args=_connect_args(DATABASE_URL),
)


# Dependency: the engine repositories open their sessions from
def get_engine():
    return engine


def create_tables(bind=None):
    # import registers the table models on SQLModel.metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)


@contextmanager
def session_scope(bind):
    """One session per repository operation.

    Store failures are logged with their full text and re-raised as a
    RepositoryError that only carries a generic message.
    """
    with Session(bind) as session:
        try:
            yield session
        except SQLAlchemyError as exc:
            session.rollback()
            logger.exception("Database operation failed")
            raise RepositoryError() from exc
