"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from rich_life.infrastructure.logging.logger import get_app_logger
from rich_life.utils.utils import get_project_root

STORAGE_BACKENDS = ("json", "sqlalchemy")


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for locating the persisted finance document.

    Attributes:
        storage_backend: Storage identifier (json or sqlalchemy).
        data_file: Path of the JSON document for the json backend.
        database_url: SQLAlchemy URL for the sqlalchemy backend.
        storage_key: Key of the document row for the sqlalchemy backend.
    """

    storage_backend: str = "json"
    data_file: Path | None = None
    database_url: str | None = None
    storage_key: str = "financeData"

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            DashboardSettings: Settings sourced from environment variables.

        Raises:
            RuntimeError: If the storage backend is not supported.
        """
        dotenv.load_dotenv()
        backend = os.getenv("RICH_LIFE_STORAGE", "json").strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise RuntimeError(
                f"Unsupported RICH_LIFE_STORAGE value: {backend}"
            )
        data_dir = get_project_root() / "data"
        raw_file = os.getenv("RICH_LIFE_DATA_FILE")
        data_file = (
            cls._normalize_path(raw_file)
            if raw_file
            else data_dir / "finance.json"
        )
        database_url = os.getenv("RICH_LIFE_DB_URL") or (
            f"sqlite:///{data_dir / 'rich_life.db'}"
        )
        storage_key = os.getenv("RICH_LIFE_STORAGE_KEY", "financeData").strip()
        return cls(
            storage_backend=backend,
            data_file=data_file,
            database_url=database_url,
            storage_key=storage_key or "financeData",
        )

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        """Expand and resolve a document path.

        Args:
            raw_path: Raw file path string.

        Returns:
            Path: Absolute path; a warning is logged when its directory is
            missing.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.parent.exists():
            get_app_logger().warning(
                f"Data directory does not exist yet at {path.parent}"
            )
        return path


__all__ = ["DashboardSettings", "STORAGE_BACKENDS"]
