import logging
import sys
from typing import Optional, Union

from .config import get_log_level

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[Union[int, str]] = None) -> int:
    """
    Один stdout-хендлер на корневом логгере.

    Уровень берётся из LOG_LEVEL, если не передан явно; неизвестное
    имя уровня → INFO. Возвращает установленный уровень.
    """
    if level is None:
        level = get_log_level()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    if not root_logger.hasHandlers():
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return level
