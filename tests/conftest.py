"""Shared fixtures: a table store on a temporary data directory."""

import pytest

from milkcentre.config import Settings
from milkcentre.db.store import TableStore


@pytest.fixture
def settings(tmp_path):
    return Settings(DATA_DIR=tmp_path / "userdata")


@pytest.fixture
def store(settings):
    store = TableStore(settings)
    result = store.initialize()
    assert result == {"success": True}
    yield store
    store.dispose()


@pytest.fixture
def customer():
    return {"name": "Asha Dairy", "phone": "9876543210", "address": "12 Lake Road"}
