"""
Настройка логирования приложения.
"""

import logging
from typing import Optional

from storefront.core.config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    """
    Настраивает корневой логгер.

    Args:
        level: Уровень логирования (по умолчанию берется из настроек)
    """
    settings = get_settings()
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger(__name__).debug(f"Logging configured with level {level}")
