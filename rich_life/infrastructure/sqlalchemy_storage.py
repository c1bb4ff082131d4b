"""SQLAlchemy-backed key/value storage for the finance document."""

from datetime import datetime, timezone

from sqlalchemy import text

from rich_life.application.ports.database import DatabaseEnginePort
from rich_life.application.ports.document_storage import DocumentStoragePort

CREATE_DOCUMENTS_SQL = """
CREATE TABLE IF NOT EXISTS documents (
    key TEXT PRIMARY KEY,
    payload TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

SELECT_DOCUMENT_SQL = text(
    """
    SELECT payload
    FROM documents
    WHERE key = :key
    """
)

DELETE_DOCUMENT_SQL = text(
    """
    DELETE FROM documents
    WHERE key = :key
    """
)

INSERT_DOCUMENT_SQL = text(
    """
    INSERT INTO documents (key, payload, updated_at)
    VALUES (:key, :payload, :updated_at)
    """
)


class SqlAlchemyDocumentStorage(DocumentStoragePort):
    """Storage keeping the document as one row of a key/value table."""

    def __init__(self, db_port: DatabaseEnginePort, key: str) -> None:
        """Initialize the storage.

        Args:
            db_port: Port providing access to the database engine.
            key: Row key under which the document is stored.
        """
        self._db_port = db_port
        self._key = key
        self._prepared = False

    def read(self) -> str | None:
        """Return the stored payload for the key, or None."""
        engine = self._prepare()
        with engine.connect() as conn:
            row = conn.execute(SELECT_DOCUMENT_SQL, {"key": self._key}).first()
        return row.payload if row else None

    def write(self, payload: str) -> None:
        """Replace the payload stored under the key."""
        engine = self._prepare()
        params = {
            "key": self._key,
            "payload": payload,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        with engine.begin() as conn:
            conn.execute(DELETE_DOCUMENT_SQL, {"key": self._key})
            conn.execute(INSERT_DOCUMENT_SQL, params)

    def _prepare(self):
        """Create the documents table on first use and return the engine."""
        engine = self._db_port.get_engine()
        if not self._prepared:
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_DOCUMENTS_SQL)
            self._prepared = True
        return engine


__all__ = ["SqlAlchemyDocumentStorage"]
