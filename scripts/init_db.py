# scripts/init_db.py

from milkcentre.config import get_settings
from milkcentre.db.store import TableStore
from milkcentre.log_config import setup_logging


def main():
    settings = get_settings()
    setup_logging(settings)

    result = TableStore(settings).initialize()
    if not result["success"]:
        raise SystemExit(f"DB init failed: {result['error']}")
    print(f"DB schema ready at {settings.db_path}")


if __name__ == "__main__":
    main()
