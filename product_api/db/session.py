"""Engine and session factory configuration."""

import logging
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from product_api.db.base import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine for ``database_url``.

    SQLite connections are shared across the server threadpool, so the
    same-thread check is disabled for file-based databases.
    """
    connect_args = {}
    if make_url(database_url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False

    return create_engine(
        database_url,
        echo=echo,
        future=True,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Sessions hand back detached rows that stay readable after commit."""
    return sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
    )


def _ensure_sqlite_directory(engine: Engine) -> None:
    url = engine.url
    if url.get_backend_name() != "sqlite":
        return
    database = url.database
    if not database or database == ":memory:" or database.startswith("file:"):
        return
    Path(database).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


def ensure_schema(engine: Engine) -> bool:
    """Create the database file and tables if they do not exist yet.

    Failures are logged and reported through the return value instead of
    raised, so the API can still start and answer requests with errors.
    """
    # Import models so they register on the metadata
    import product_api.db.models  # noqa: F401

    try:
        _ensure_sqlite_directory(engine)
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Error creating database: {e}", exc_info=True)
        return False

    logger.info(f"Database schema ready at {engine.url.render_as_string()}")
    return True
