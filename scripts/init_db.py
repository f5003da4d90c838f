from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from roster_attendance.config import get_settings_module
from roster_attendance.database.bootstrap import apply_schema, list_tables
from roster_attendance.database.connection import DBConfig, DatabaseConnection
from roster_attendance.main import configure_logging

logger = logging.getLogger("init_db")


def main() -> None:
    load_dotenv(override=False)
    configure_logging(logging.INFO)

    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))
    conn = DatabaseConnection(config)

    apply_schema(conn)
    tables = list_tables(conn)
    logger.info(
        "Applied schema.sql -> %s@%s:%s/%s (tables=%d)",
        config.user,
        config.host,
        config.port,
        config.database,
        len(tables),
    )


if __name__ == "__main__":
    main()
