"""Tests for full-database export and restore."""

import json

import pytest

from milkcentre.config import Settings
from milkcentre.db.schema import TABLE_NAMES
from milkcentre.db.store import TableStore
from milkcentre.services.backup import export_data, import_data, read_backup, write_backup


@pytest.fixture
def seeded(store):
    store.save("customers", {"id": "c1", "name": "Asha Dairy", "phone": "98765"})
    store.save("products", {"id": "p1", "name": "Full Cream 500ml", "price": 33.0, "stock": 120})
    store.save("orders", {"id": "o1", "customerId": "c1", "totalAmount": 66.0, "date": "2026-10-18"})
    store.save("order_items", {"orderId": "o1", "productId": "p1", "quantity": 2, "price": 33.0})
    store.save("invoices", {
        "id": "i1", "customerId": "c1", "orderId": "o1", "amount": 66.0,
        "date": "2026-10-18", "dueDate": "2026-11-01",
    })
    store.save("settings", {"id": "s1", "name": "company_name", "value": "Milk Centre"})
    return store


@pytest.fixture
def other_store(tmp_path):
    store = TableStore(Settings(DATA_DIR=tmp_path / "restore"))
    assert store.initialize()["success"]
    yield store
    store.dispose()


def test_export_contains_every_table(seeded):
    snapshot = export_data(seeded)

    assert snapshot["success"] is True
    assert set(snapshot["data"]) == set(TABLE_NAMES)
    assert snapshot["data"]["order_items"][0]["id"] == "o1_p1"
    assert snapshot["timestamp"].endswith("Z")


def test_export_uninitialized_store_fails(settings):
    snapshot = export_data(TableStore(settings))
    assert snapshot == {"success": False, "error": "Database not initialized"}


def test_import_restores_exported_rows(seeded, other_store):
    snapshot = export_data(seeded)

    result = import_data(other_store, snapshot["data"])

    assert result["success"] is True
    assert result["counts"] == {table: 1 for table in TABLE_NAMES}
    for table in TABLE_NAMES:
        assert other_store.query(table)["data"] == snapshot["data"][table]


def test_import_only_replaces_tables_present(seeded):
    result = import_data(seeded, {"settings": [], "widgets": [{"id": "w1"}]})

    assert result == {"success": True, "counts": {"settings": 0}}
    assert seeded.query("settings")["data"] == []
    assert len(seeded.query("customers")["data"]) == 1


def test_import_stops_on_failing_table(seeded):
    result = import_data(seeded, {
        "customers": [{"id": "c9", "name": "New", "phone": "1"}],
        "products": [{"id": "p9", "name": "No price"}],
        "settings": [],
    })

    assert result["success"] is False
    assert "products.price" in result["error"]
    assert result["counts"] == {"customers": 1}
    # products untouched, settings never reached
    assert [row["id"] for row in seeded.query("products")["data"]] == ["p1"]
    assert len(seeded.query("settings")["data"]) == 1


def test_write_and_read_backup_file(seeded, other_store, tmp_path):
    path = tmp_path / "backups" / "milk-centre.json"

    result = write_backup(seeded, path)

    assert result["success"] is True
    assert result["filePath"] == str(path)
    with open(path, encoding="utf-8") as f:
        assert json.load(f)["success"] is True

    tables = read_backup(path)
    assert import_data(other_store, tables)["success"] is True
    assert other_store.get_by_id("customers", "c1")["data"]["name"] == "Asha Dairy"


def test_read_backup_accepts_bare_table_mapping(tmp_path):
    path = tmp_path / "bare.json"
    path.write_text(json.dumps({"customers": []}), encoding="utf-8")
    assert read_backup(path) == {"customers": []}


def test_read_backup_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        read_backup(path)
