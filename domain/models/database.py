"""
Database configuration and session management.

Engines are built from the settings handed to the application container,
never from import-time globals.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger("solidshop.database")

# Create SQLAlchemy Base
Base = declarative_base()


def _engine_kwargs(url: str) -> dict:
    # SQLite connections are shared across the threadpool FastAPI runs sync routes in
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {}


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for ``url``; no connection is opened until first use"""
    return create_engine(url, echo=echo, future=True, **_engine_kwargs(url))


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, future=True)


def init_database(engine: Engine):
    """Initialize database schema"""
    with engine.begin() as conn:
        Base.metadata.create_all(bind=conn)
    logger.info("Database tables created successfully")
