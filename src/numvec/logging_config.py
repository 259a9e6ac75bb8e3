"""
Logging Configuration

Настройка логгера пакета numvec. Модули пишут в logging.getLogger("numvec.<модуль>"),
все логгеры живут под пространством имён "numvec".
"""

import logging
import sys
from typing import Final, Optional

# Корневой логгер пакета
LOGGER_NAMESPACE: Final[str] = "numvec"

# Формат: Time - Module - Level - Message
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: Final[str] = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Настройка логгера пространства имён numvec.

    Повторный вызов заменяет обработчики, а не дублирует их.

    Args:
        level: Уровень логирования (например, logging.DEBUG)
        log_file: Опциональный путь к файлу лога

    Returns:
        Настроенный логгер пакета
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
