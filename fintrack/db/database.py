"""
Database engine and sessions for the scenario store.

Scenarios live in a local SQLite file by default (see Settings.database_url).
"""

from contextlib import contextmanager
from typing import Any, Dict, Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from fintrack.config import Settings, get_settings
from fintrack.db.models import Base


def engine_options(settings: Settings) -> Dict[str, Any]:
    """Keyword arguments for create_engine() derived from settings."""
    options: Dict[str, Any] = {"echo": settings.debug}
    if settings.database_url.startswith("sqlite"):
        # Request handlers may run on a different thread than the connection's
        options["connect_args"] = {"check_same_thread": False}
    return options


def build_engine(settings: Settings) -> Engine:
    return create_engine(settings.database_url, **engine_options(settings))


engine = build_engine(get_settings())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """Create the scenario tables if they do not exist."""
    Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding a session per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """Session for scripts: commits on success, rolls back on error."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
