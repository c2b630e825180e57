# scripts/import_data.py
"""
Restore tables from a JSON backup, replacing their current contents.

Usage:
    python -m scripts.import_data backups/milk-centre.json
"""

import argparse
import logging

from milkcentre.config import get_settings
from milkcentre.db.store import TableStore
from milkcentre.log_config import setup_logging
from milkcentre.services.backup import import_data, read_backup

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("path", help="Backup JSON file written by export_data")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings)

    tables = read_backup(args.path)

    store = TableStore(settings)
    init = store.initialize()
    if not init["success"]:
        raise SystemExit(f"DB init failed: {init['error']}")

    result = import_data(store, tables)
    store.dispose()

    for table, count in result["counts"].items():
        logger.info("%-12s %d rows", table, count)
    if not result["success"]:
        raise SystemExit(f"Import failed: {result['error']}")

    logger.info("Import complete.")


if __name__ == "__main__":
    main()
