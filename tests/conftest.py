"""Test fixtures and configuration."""

import pytest

from logshelf import shelf
from logshelf.store import LogStore, RetentionPolicy
from logshelf.store.files import timestamp_name


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep user config and environment out of every test."""
    for name in (
        "LOGSHELF_DIR",
        "LOGSHELF_MAX_FILE_COUNT",
        "LOGSHELF_MAX_FILE_SIZE",
        "LOGSHELF_CARRY_OVER_BYTES",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOGSHELF_CONFIG", str(tmp_path / "no-config.yaml"))


@pytest.fixture
def log_dir(tmp_path):
    """Path to a (not yet created) log directory."""
    return tmp_path / "logs"


@pytest.fixture
def make_store(log_dir):
    """Factory for stores that are shut down after the test."""
    stores = []

    def _make(**policy):
        store = LogStore(log_dir, RetentionPolicy(**policy))
        stores.append(store)
        return store

    yield _make
    for store in stores:
        store.shutdown()


@pytest.fixture
def populated_dir(log_dir):
    """A log directory with three files, oldest first in the returned list."""
    from datetime import datetime, timedelta

    log_dir.mkdir(parents=True)
    start = datetime(2026, 1, 2, 3, 4, 5).astimezone()
    paths = []
    for i in range(3):
        path = log_dir / timestamp_name(start + timedelta(minutes=i))
        path.write_text("".join(f"file{i} line{j}\n" for j in range(3)), encoding="utf-8")
        paths.append(path)
    return paths


@pytest.fixture
def reset_shelf():
    """Drop the shared default store after the test."""
    yield
    store = shelf._default_store
    shelf._default_store = None
    if store is not None:
        store.shutdown()
