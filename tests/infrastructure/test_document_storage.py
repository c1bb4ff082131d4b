"""Tests for the JSON file and SQLAlchemy document storages."""

from sqlalchemy import create_engine

from rich_life.infrastructure.json_file_storage import JsonFileDocumentStorage
from rich_life.infrastructure.sqlalchemy_storage import (
    SqlAlchemyDocumentStorage,
)


class _EnginePort:
    def __init__(self, engine) -> None:
        self.engine = engine
        self.calls = 0

    def get_engine(self):
        self.calls += 1
        return self.engine


def test_json_storage_reads_none_when_missing(tmp_path) -> None:
    storage = JsonFileDocumentStorage(tmp_path / "finance.json")

    assert storage.read() is None


def test_json_storage_writes_and_creates_directories(tmp_path) -> None:
    path = tmp_path / "nested" / "finance.json"
    storage = JsonFileDocumentStorage(path)

    storage.write('{"snapshots": []}')
    storage.write('{"snapshots": [1]}')

    assert storage.read() == '{"snapshots": [1]}'
    assert storage.path == path
    assert [p.name for p in path.parent.iterdir()] == ["finance.json"]


def test_sqlalchemy_storage_round_trip(tmp_path) -> None:
    engine = create_engine(f"sqlite:///{tmp_path / 'finance.db'}", future=True)
    port = _EnginePort(engine)
    storage = SqlAlchemyDocumentStorage(port, key="financeData")

    assert storage.read() is None
    storage.write('{"v": 1}')
    storage.write('{"v": 2}')

    assert storage.read() == '{"v": 2}'
    with engine.connect() as conn:
        count = conn.exec_driver_sql("SELECT COUNT(*) FROM documents").scalar()
    assert count == 1
    engine.dispose()


def test_sqlalchemy_storage_keys_are_independent(tmp_path) -> None:
    engine = create_engine(f"sqlite:///{tmp_path / 'finance.db'}", future=True)
    port = _EnginePort(engine)
    main = SqlAlchemyDocumentStorage(port, key="financeData")
    backup = SqlAlchemyDocumentStorage(port, key="backup")

    main.write("main")
    backup.write("backup")

    assert main.read() == "main"
    assert backup.read() == "backup"
    engine.dispose()
