# scripts/export_data.py
"""
Write a JSON backup of every table.

Usage:
    python -m scripts.export_data backups/milk-centre.json
"""

import argparse
import logging

from milkcentre.config import get_settings
from milkcentre.db.store import TableStore
from milkcentre.log_config import setup_logging
from milkcentre.services.backup import write_backup

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("path", help="Output JSON file")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings)

    store = TableStore(settings)
    init = store.initialize()
    if not init["success"]:
        raise SystemExit(f"DB init failed: {init['error']}")

    result = write_backup(store, args.path)
    store.dispose()
    if not result["success"]:
        raise SystemExit(f"Export failed: {result['error']}")

    logger.info("Export complete: %s", result["filePath"])


if __name__ == "__main__":
    main()
