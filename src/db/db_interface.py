#!/usr/bin/env python3
"""
Database Interface Configuration

Shared SQLAlchemy declarative base, engine and session factory for the business directory.
The engine is created lazily so that importing models or services never opens a connection.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from contextlib import contextmanager
from typing import Generator, Optional

from src.env_var_injection import get_database_url

# Shared SQLAlchemy DbInterface
DbInterface = declarative_base()

# Lazy initialization to prevent real database connection during tests
_engine = None
_SessionLocal = None


def get_engine():
    """Get the database engine, creating it if necessary."""
    global _engine
    if _engine is None:
        _engine = create_engine(get_database_url(), pool_pre_ping=True)
    return _engine


def get_session_local():
    """Get the session factory, creating it if necessary."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal


def configure_engine(database_url: Optional[str] = None, **engine_kwargs):
    """Replace the lazily-built engine, e.g. for a runner pointed at an explicit URL."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = create_engine(database_url or get_database_url(), **engine_kwargs)
    _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    return _engine


@contextmanager
def get_db_session() -> Generator:
    """Context manager for database sessions."""
    session = get_session_local()()
    try:
        yield session
    finally:
        session.close()
