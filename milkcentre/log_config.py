# milkcentre/log_config.py

import logging
from typing import Optional

from milkcentre.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure the root logger from settings. Safe to call more than once;
    only the first call installs a handler.
    """
    settings = settings or get_settings()
    level = getattr(logging, (settings.LOG_LEVEL or "INFO").upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)

    # SQLAlchemy logs every statement at INFO when echo is on
    sql_level = logging.INFO if settings.DB_ECHO else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)
