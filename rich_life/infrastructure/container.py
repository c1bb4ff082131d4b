"""Composition root for wiring infrastructure adapters."""

from pathlib import Path

from sqlalchemy.engine import make_url

from rich_life.application.ports.database import DatabaseEnginePort
from rich_life.application.ports.document_storage import DocumentStoragePort
from rich_life.application.snapshot_store import SnapshotStore
from rich_life.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from rich_life.infrastructure.default_dataset import load_default_document
from rich_life.infrastructure.json_file_storage import JsonFileDocumentStorage
from rich_life.infrastructure.logging.logger import get_app_logger
from rich_life.infrastructure.settings import DashboardSettings
from rich_life.infrastructure.sqlalchemy_storage import (
    SqlAlchemyDocumentStorage,
)


def build_database_adapter(
    settings: DashboardSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter for the configured URL."""
    resolved = settings or DashboardSettings.from_env()
    if resolved.database_url is None:
        raise RuntimeError("SQLAlchemy storage requires RICH_LIFE_DB_URL.")
    _ensure_sqlite_directory(resolved.database_url)
    return SqlAlchemyDatabaseEngineAdapter(resolved.database_url)


def build_document_storage(
    settings: DashboardSettings | None = None,
) -> DocumentStoragePort:
    """Return the configured document storage adapter."""
    resolved = settings or DashboardSettings.from_env()
    if resolved.storage_backend == "sqlalchemy":
        return SqlAlchemyDocumentStorage(
            build_database_adapter(resolved),
            key=resolved.storage_key,
        )
    if resolved.data_file is None:
        raise RuntimeError("JSON storage requires RICH_LIFE_DATA_FILE.")
    return JsonFileDocumentStorage(resolved.data_file)


def build_snapshot_store(
    settings: DashboardSettings | None = None,
) -> SnapshotStore:
    """Return a snapshot store over the configured storage."""
    return SnapshotStore(
        build_document_storage(settings),
        defaults=load_default_document(),
        logger=get_app_logger(),
    )


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database:
        if url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)


__all__ = [
    "build_database_adapter",
    "build_document_storage",
    "build_snapshot_store",
]
