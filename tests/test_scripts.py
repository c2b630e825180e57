"""Tests for the command-line maintenance scripts."""

import json

import pytest

from milkcentre.config import Settings, get_settings
from milkcentre.db.store import TableStore
from scripts import export_data, import_data, init_db


@pytest.fixture
def data_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("MILK_CENTRE_DATA_DIR", str(tmp_path / "userdata"))
    get_settings.cache_clear()
    yield tmp_path / "userdata"
    get_settings.cache_clear()


def test_init_db_creates_database(data_dir):
    init_db.main()
    assert (data_dir / "database" / "milk-centre.db").exists()


def test_export_then_import_round_trip(data_dir, tmp_path):
    store = TableStore(Settings(DATA_DIR=data_dir))
    store.initialize()
    store.save("customers", {"id": "c1", "name": "Asha Dairy", "phone": "98765"})

    path = tmp_path / "backup.json"
    export_data.main([str(path)])
    assert json.loads(path.read_text(encoding="utf-8"))["data"]["customers"][0]["id"] == "c1"

    store.delete("customers", "c1")
    import_data.main([str(path)])

    assert store.get_by_id("customers", "c1")["data"]["name"] == "Asha Dairy"
    store.dispose()


def test_import_failure_exits(data_dir, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"products": [{"id": "p1", "name": "No price"}]}), encoding="utf-8")

    with pytest.raises(SystemExit):
        import_data.main([str(path)])
