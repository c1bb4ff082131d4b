"""Database infrastructure for the document store.

This module exposes helpers to create and reuse a SQLAlchemy engine for the
key/value table that holds the finance document. It belongs to the
infrastructure layer because it deals with an external system.
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from rich_life.application.ports.database import DatabaseEnginePort


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine with connection health checks enabled.
    """
    return create_engine(
        db_url,
        pool_pre_ping=True,
        future=True,
    )


_engines: dict[str, Engine] = {}


def get_engine(db_url: str) -> Engine:
    """Get a cached SQLAlchemy engine for a database URL.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: Lazily initialized engine shared per URL.
    """
    engine: Optional[Engine] = _engines.get(db_url)
    if engine is None:
        engine = _create_engine(db_url)
        _engines[db_url] = engine
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides engine creation behind the port so storage adapters
    can depend only on the protocol.
    """

    def __init__(self, db_url: str) -> None:
        """Initialize the adapter.

        Args:
            db_url: Fully qualified database URL.
        """
        self._db_url = db_url

    def get_engine(self) -> Engine:
        """Get the engine holding the document table.

        Returns:
            Engine: SQLAlchemy engine connected to the configured database.
        """
        return get_engine(self._db_url)


__all__ = ["get_engine", "SqlAlchemyDatabaseEngineAdapter"]
