# expense_api/database.py
# Connection provider: builds, verifies and disposes the pooled engine

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from .config import Settings
from .errors import StartupError

logger = logging.getLogger(__name__)


def parse_database_url(dsn: str) -> URL:
    """Parse a connection string, accepting the ``postgres://`` form Supabase hands out."""
    try:
        url = make_url(dsn)
    except ArgumentError as exc:
        # The raw string may carry a password, so it is left out of the message.
        raise StartupError("Could not parse database URL") from exc

    if url.drivername == "postgres":
        url = url.set(drivername="postgresql")
    return url


def create_db_engine(settings: Settings) -> Engine:
    """Build the engine without touching the network.

    PostgreSQL goes through psycopg2, which binds parameters client-side and
    uses the simple query protocol, so nothing is prepared server-side. That
    keeps the pool compatible with PgBouncer in transaction mode.
    """
    url = parse_database_url(settings.database_url)

    engine_args = {}
    if url.get_backend_name() == "sqlite":
        engine_args["connect_args"] = {"check_same_thread": False}
    else:
        engine_args.update(
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_pre_ping=True,
        )

    try:
        return create_engine(url, **engine_args)
    except (ArgumentError, ImportError) as exc:
        raise StartupError(f"Could not create database pool: {exc}") from exc


def ping(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def connect(settings: Settings) -> Engine:
    """Create the shared pool and check it is alive.

    Raises StartupError on any failure; deciding whether to exit is left to
    the caller.
    """
    engine = create_db_engine(settings)
    try:
        ping(engine)
    except SQLAlchemyError as exc:
        engine.dispose()
        raise StartupError(f"Database ping failed: {exc}") from exc

    logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))
    return engine


def close(engine: Engine) -> None:
    engine.dispose()
    logger.info("Database pool closed")
