"""
Logger — Общая настройка логирования closurekit

- Один StreamHandler в stdout на logger (повторная настройка игнорируется)
- Уровень берётся из аргумента или переменной окружения LOG_LEVEL
- Неизвестный уровень → DEFAULT_LOG_LEVEL (импорт пакета никогда не падает)
"""

import logging
import os
import sys
from typing import Final, Optional

__all__ = ["DEFAULT_LOG_LEVEL", "LOG_FORMAT", "logger", "resolve_log_level", "setup_logger"]

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Уровень по умолчанию: демо печатает результаты само, лог — только предупреждения
DEFAULT_LOG_LEVEL: Final[int] = logging.WARNING

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


# =============================================================================
# НАСТРОЙКА
# =============================================================================


def resolve_log_level(level: Optional[str]) -> int:
    """
    Имя уровня (DEBUG/INFO/WARNING/ERROR/CRITICAL, регистр не важен) → int.

    Args:
        level: Имя уровня или None

    Returns:
        Числовой уровень logging; DEFAULT_LOG_LEVEL для None/пустого/неизвестного имени

    Examples:
        >>> resolve_log_level("debug") == logging.DEBUG
        True
        >>> resolve_log_level("verbose") == DEFAULT_LOG_LEVEL
        True
    """
    if not level:
        return DEFAULT_LOG_LEVEL

    resolved = logging.getLevelName(level.strip().upper())
    # getLevelName возвращает строку "Level X" для неизвестных имён
    if not isinstance(resolved, int):
        return DEFAULT_LOG_LEVEL

    return resolved


def setup_logger(
    name: str = "closurekit",
    level: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Настройка logger с выводом в stdout.

    Args:
        name: Имя logger (дочерние: "closurekit.<module>")
        level: Имя уровня; если None — из LOG_LEVEL
        format_string: Формат записи (default: LOG_FORMAT)

    Returns:
        Настроенный logger; уже настроенный возвращается без изменений
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=format_string or LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    )
    logger.addHandler(handler)
    logger.setLevel(resolve_log_level(level or os.getenv("LOG_LEVEL")))
    logger.propagate = False

    return logger


logger = setup_logger()
