"""Настройка логирования."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Настроить корневой логгер приложения."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("member_search").setLevel(level.upper())
