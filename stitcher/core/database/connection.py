# File: stitcher/core/database/connection.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from .base import Base


def create_db_engine(database_url: str) -> Engine:
    """
    Builds an engine for the job ledger.

    SQLite connections are shared with worker threads, so same-thread checks
    are disabled. An in-memory database must keep a single connection alive,
    otherwise every new connection would see an empty database.
    """
    kwargs = {"echo": False}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    return create_engine(database_url, **kwargs)


def create_session_factory(database_url: str) -> sessionmaker:
    """Creates the engine, ensures the schema exists and returns a session factory."""
    # Registers the ledger table on Base.metadata
    from stitcher.core.jobs import models  # noqa: F401

    engine = create_db_engine(database_url)
    Base.metadata.create_all(bind=engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
