# milkcentre/db/store.py
"""
Generic table store over the fixed set of application tables.

Every public method returns a result dict, ``{"success": True, ...}`` or
``{"success": False, "error": "<message>"}``, and never raises. Batch saves
and table imports run inside a single transaction and are all-or-nothing.
"""

import logging
import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Union

from sqlalchemy import select
from sqlalchemy.engine import Connection, Engine

from milkcentre.config import Settings, get_settings
from milkcentre.db.engine import create_store_engine
from milkcentre.db.errors import (
    InitializationError,
    InvalidColumnError,
    InvalidQueryError,
    InvalidTableError,
    NotInitializedError,
    StoreError,
)
from milkcentre.db.schema import TABLES, TABLE_NAMES, metadata

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2026-10-19T08:30:00.123Z."""
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def _error_message(exc: Exception) -> str:
    # SQLAlchemy wraps DBAPI errors; the driver's message is the useful part
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return str(orig)
    return str(exc)


def _failure(exc: Exception) -> Dict[str, Any]:
    return {"success": False, "error": _error_message(exc)}


class TableStore:
    """
    Persistence facade over the whitelisted tables, backed by one SQLite
    file. Construct once per process and call initialize() before use.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.db_path = self.settings.db_path
        self._engine: Optional[Engine] = None

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    # ---- Lifecycle ----

    def initialize(self) -> Dict[str, Any]:
        try:
            engine = self._engine
            if engine is None:
                self.settings.db_dir.mkdir(parents=True, exist_ok=True)
                logger.info("Initializing database at: %s", self.db_path)
                engine = create_store_engine(self.settings)

            try:
                self._create_tables(engine)
            except Exception as e:
                if engine is not self._engine:
                    engine.dispose()
                raise InitializationError(_error_message(e)) from e

            self._engine = engine
            logger.info("Database initialized successfully")
            return {"success": True}
        except Exception as e:
            logger.error("Database initialization failed: %s", _error_message(e))
            return _failure(e)

    def _create_tables(self, engine: Engine) -> None:
        # checkfirst: CREATE TABLE only for tables that do not exist yet
        metadata.create_all(engine, checkfirst=True)
        logger.info("Database tables created successfully")

    def dispose(self) -> None:
        """Release pooled connections. The store must be re-initialized before reuse."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def _require_engine(self) -> Engine:
        if self._engine is None:
            raise NotInitializedError()
        return self._engine

    # ---- Validation ----

    def validate_table_name(self, table: str) -> None:
        if not isinstance(table, str) or table not in TABLES:
            raise InvalidTableError(table)

    def _table(self, table: str):
        self.validate_table_name(table)
        return TABLES[table]

    def _column(self, table, name: str):
        if not isinstance(name, str) or name not in table.c:
            raise InvalidColumnError(table.name, name)
        return table.c[name]

    # ---- Save ----

    def save(self, table: str, data: Union[Mapping, Sequence[Mapping]]) -> Dict[str, Any]:
        try:
            engine = self._require_engine()
            tbl = self._table(table)

            if isinstance(data, (list, tuple)):
                results: List[Record] = []
                # begin() commits on success and rolls back on the first error
                with engine.begin() as conn:
                    for item in data:
                        results.append(self._save_item(conn, tbl, item))
                return {"success": True, "data": results}

            with engine.begin() as conn:
                result = self._save_item(conn, tbl, data)
            return {"success": True, "data": result}
        except Exception as e:
            logger.error("Error saving data to %s: %s", table, _error_message(e))
            return _failure(e)

    def _save_item(self, conn: Connection, table, item: Mapping) -> Record:
        """
        Insert or update one record and return the stored row.

        Only the columns present in ``item`` are written. ``createdAt`` is
        never overwritten and ``updatedAt`` is refreshed on every update.
        """
        if not isinstance(item, Mapping):
            raise StoreError(f"Record for {table.name} must be an object, got {type(item).__name__}")

        record = dict(item)
        if not record.get("id"):
            if table.name == "order_items":
                # One row per (orderId, productId) unless an explicit id is given
                record["id"] = f"{record.get('orderId')}_{record.get('productId')}"
            else:
                record["id"] = str(uuid.uuid4())

        for key in record:
            self._column(table, key)

        record_id = record["id"]
        exists = conn.execute(
            select(table.c.id).where(table.c.id == record_id)
        ).first()
        now = utc_timestamp()

        if exists is not None:
            changes = {
                key: value
                for key, value in record.items()
                if key not in ("id", "createdAt")
            }
            if "updatedAt" in table.c:
                changes["updatedAt"] = now
            if changes:
                conn.execute(
                    table.update().where(table.c.id == record_id).values(changes)
                )
        else:
            for key in ("createdAt", "updatedAt"):
                if key in table.c and record.get(key) is None:
                    record[key] = now
            conn.execute(table.insert().values(record))

        row = conn.execute(
            select(table).where(table.c.id == record_id)
        ).mappings().first()
        return dict(row)

    # ---- Read ----

    def query(self, table: str, params: Optional[Mapping] = None) -> Dict[str, Any]:
        try:
            engine = self._require_engine()
            tbl = self._table(table)
            params = params or {}

            stmt = select(tbl)

            where = params.get("where") or {}
            for key, value in where.items():
                stmt = stmt.where(self._column(tbl, key) == value)

            order_by = params.get("orderBy")
            if order_by:
                stmt = stmt.order_by(*self._order_clauses(tbl, order_by))

            limit = params.get("limit")
            if limit is not None:
                stmt = stmt.limit(self._non_negative_int("limit", limit))
                offset = params.get("offset")
                if offset is not None:
                    stmt = stmt.offset(self._non_negative_int("offset", offset))

            with engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()

            return {"success": True, "data": [dict(row) for row in rows]}
        except Exception as e:
            logger.error("Error querying data from %s: %s", table, _error_message(e))
            return _failure(e)

    def _order_clauses(self, table, order_by: str):
        if not isinstance(order_by, str):
            raise InvalidQueryError(f"orderBy must be a string, got {type(order_by).__name__}")

        clauses = []
        for part in order_by.split(","):
            tokens = part.split()
            if not tokens or len(tokens) > 2:
                raise InvalidQueryError(f"Invalid orderBy: {order_by!r}")

            column = self._column(table, tokens[0])
            direction = tokens[1].lower() if len(tokens) == 2 else "asc"
            if direction == "asc":
                clauses.append(column.asc())
            elif direction == "desc":
                clauses.append(column.desc())
            else:
                raise InvalidQueryError(f"Invalid orderBy direction: {tokens[1]!r}")
        return clauses

    @staticmethod
    def _non_negative_int(name: str, value) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidQueryError(f"{name} must be a non-negative integer, got {value!r}")
        return value

    def get_by_id(self, table: str, id: str) -> Dict[str, Any]:
        try:
            engine = self._require_engine()
            tbl = self._table(table)

            with engine.connect() as conn:
                row = conn.execute(
                    select(tbl).where(tbl.c.id == id)
                ).mappings().first()

            return {"success": True, "data": dict(row) if row is not None else None}
        except Exception as e:
            logger.error("Error getting record %s from %s: %s", id, table, _error_message(e))
            return _failure(e)

    # ---- Delete / import ----

    def delete(self, table: str, id: Union[str, Sequence[str]]) -> Dict[str, Any]:
        try:
            engine = self._require_engine()
            tbl = self._table(table)

            if isinstance(id, (list, tuple, set)):
                ids = list(id)
                if not ids:
                    return {"success": True, "deleted": 0}
                stmt = tbl.delete().where(tbl.c.id.in_(ids))
            else:
                stmt = tbl.delete().where(tbl.c.id == id)

            with engine.begin() as conn:
                result = conn.execute(stmt)

            return {"success": True, "deleted": result.rowcount}
        except Exception as e:
            logger.error("Error deleting data from %s: %s", table, _error_message(e))
            return _failure(e)

    def import_table(self, table: str, data: Sequence[Mapping]) -> Dict[str, Any]:
        """Replace every row of ``table`` with ``data`` in one transaction."""
        try:
            engine = self._require_engine()
            tbl = self._table(table)

            if not isinstance(data, (list, tuple)):
                raise StoreError(f"Import data for {table} must be a list of records")

            with engine.begin() as conn:
                conn.execute(tbl.delete())
                for item in data:
                    self._save_item(conn, tbl, item)

            logger.info("Imported %d records into %s", len(data), table)
            return {"success": True, "count": len(data)}
        except Exception as e:
            logger.error("Error importing data to %s: %s", table, _error_message(e))
            return _failure(e)


__all__ = ["TableStore", "TABLE_NAMES", "utc_timestamp"]
