from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from .config import get_settings_module
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .groups.model import GroupPolicy

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def bootstrap() -> Container:
    """Load settings, configure logging, optionally create the schema, and wire the services."""
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    db_config = getattr(settings, "DB_CONFIG")
    default_policy = GroupPolicy(
        tolerance_minutes=int(getattr(settings, "DEFAULT_TOLERANCE_MINUTES", 10)),
        policy_kind=str(getattr(settings, "DEFAULT_POLICY_KIND", "STANDARD")).upper(),
    )

    logger.debug(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    container = build_container(db_config=db_config, default_policy=default_policy)

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn)
        logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))

    return container
