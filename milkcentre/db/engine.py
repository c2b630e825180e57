# milkcentre/db/engine.py

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from milkcentre.config import Settings


def _enable_wal(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA journal_mode=WAL")
    finally:
        cursor.close()


def create_store_engine(settings: Settings) -> Engine:
    """
    Build the engine for the store's database file. The parent directory
    must already exist. Every pooled connection runs in WAL mode.
    """
    engine = create_engine(settings.db_url, echo=settings.DB_ECHO, future=True)
    event.listen(engine, "connect", _enable_wal)
    return engine
