# milkcentre/services/backup.py
"""
Full-database backup and restore built on the table store.

A snapshot has the shape::

    {"success": True, "data": {"customers": [...], ...}, "timestamp": "..."}

and is what write_backup() stores on disk as JSON.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from milkcentre.db.schema import TABLE_NAMES
from milkcentre.db.store import TableStore, utc_timestamp

logger = logging.getLogger(__name__)


def export_data(store: TableStore) -> Dict[str, Any]:
    """Snapshot every table. Fails as a whole if any table cannot be read."""
    tables: Dict[str, list] = {}

    for table in TABLE_NAMES:
        result = store.query(table)
        if not result["success"]:
            logger.error("Export failed on %s: %s", table, result["error"])
            return {"success": False, "error": result["error"]}
        tables[table] = result["data"]

    return {"success": True, "data": tables, "timestamp": utc_timestamp()}


def import_data(store: TableStore, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Replace each table present in ``data`` with its rows.

    Tables are restored parents first. Keys that are not known tables are
    ignored. Each table is replaced in its own transaction, so a failure
    stops the restore but leaves earlier tables already replaced.
    """
    counts: Dict[str, int] = {}

    for table in TABLE_NAMES:
        if table not in data or data[table] is None:
            continue

        result = store.import_table(table, data[table])
        if not result["success"]:
            return {"success": False, "error": result["error"], "counts": counts}
        counts[table] = result["count"]

    unknown = sorted(set(data) - set(TABLE_NAMES))
    if unknown:
        logger.warning("Ignored unknown tables in import: %s", ", ".join(unknown))

    return {"success": True, "counts": counts}


def write_backup(store: TableStore, path: Union[str, Path]) -> Dict[str, Any]:
    snapshot = export_data(store)
    if not snapshot["success"]:
        return snapshot

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(snapshot, f, indent=2, ensure_ascii=False)

    logger.info("Backup written to %s", path)
    return {"success": True, "filePath": str(path), "timestamp": snapshot["timestamp"]}


def read_backup(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a backup file. Accepts either a full snapshot or a bare
    ``{table: rows}`` mapping and returns the ``{table: rows}`` part.
    """
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    if not isinstance(payload, dict):
        raise ValueError(f"Backup file {path} does not contain a JSON object")

    tables: Optional[Any] = payload.get("data") if "data" in payload else payload
    if not isinstance(tables, dict):
        raise ValueError(f"Backup file {path} has no table data")
    return tables
