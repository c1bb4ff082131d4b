"""Database ports for the document store.

This module defines the application-layer protocol for accessing a database
engine. Infrastructure implementations provide concrete adapters that
satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine that stores the finance document."""

    def get_engine(self) -> Engine:
        """Get the engine holding the document table.

        Returns:
            Engine: SQLAlchemy engine connected to the configured database.
        """


__all__ = ["DatabaseEnginePort"]
