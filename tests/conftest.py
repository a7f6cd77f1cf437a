"""
Shared fixtures for shortlink-core tests.

Storage tests run against a real SQLAlchemy engine on in-memory SQLite;
CLI tests use a SQLite file under tmp_path since every command opens its
own connection.
"""

from typing import Generator

import pytest

from linkstore.database.base import StorageHandle


@pytest.fixture
def handle() -> StorageHandle:
    """A constructed handle that has not touched the database."""
    return StorageHandle("sqlite://")


@pytest.fixture
def connected_handle() -> Generator[StorageHandle, None, None]:
    """An initialized handle on an empty in-memory database."""
    h = StorageHandle("sqlite://")
    h.init()
    yield h
    h.close()


@pytest.fixture
def installed_handle(connected_handle: StorageHandle) -> StorageHandle:
    """An initialized handle with all tables created."""
    connected_handle.create_tables()
    return connected_handle


@pytest.fixture
def cli_config(tmp_path) -> dict:
    """Settings dict pointing the CLI at a throwaway database."""
    return {
        "database_url": f"sqlite:///{tmp_path / 'shortlink.db'}",
        "db_user": "",
        "db_pass": "",
        "user_dir": str(tmp_path / "user"),
        "debug": False,
        "fast_init": False,
    }
