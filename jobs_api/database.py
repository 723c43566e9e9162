import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from jobs_api.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()

DIALECT_NAMES = {"postgresql": "PostgreSQL", "sqlite": "SQLite"}


def build_engine(settings: Settings) -> Engine:
    """
    Create the connection pool for the configured database.

    PostgreSQL connections are encrypted with the configured sslmode; the
    default ``require`` does not verify the server certificate, so self-signed
    certificates are accepted.
    """
    url = settings.database_url
    if url.get_backend_name() == "sqlite":
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        connect_args={"sslmode": settings.DB_SSLMODE},
    )


def check_connection(engine: Engine) -> bool:
    try:
        with engine.connect():
            pass
    except SQLAlchemyError as e:
        logger.error(f"Error acquiring database connection: {e}")
        return False
    name = DIALECT_NAMES.get(engine.dialect.name, engine.dialect.name)
    logger.info(f"Connected to {name} database")
    return True


def init_schema(engine: Engine) -> bool:
    """Create the jobs table if it does not exist yet."""
    from jobs_api import models  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.error(f"Error creating table: {e}")
        return False
    logger.info("Jobs table created or already exists")
    return True


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
