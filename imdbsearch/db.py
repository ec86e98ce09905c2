import logging
from typing import Any, List, Optional, Sequence

import psycopg2
from psycopg2.extras import DictCursor

from .config import ConnectionConfig
from .errors import DataAccessFailure

logger = logging.getLogger(__name__)


def get_connection(config: Optional[ConnectionConfig] = None):
    """
    Открывает соединение с PostgreSQL.

    Закрывать соединение — забота вызывающего кода: сервисы поиска
    только читают через него и никогда его не закрывают.
    """
    if config is None:
        config = ConnectionConfig.from_env()

    logger.info("Подключаюсь к базе %s", config)
    try:
        return psycopg2.connect(cursor_factory=DictCursor, **config.connect_kwargs())
    except psycopg2.Error as exc:
        raise DataAccessFailure(f"не удалось подключиться к {config}: {exc}") from exc


def fetch_all(conn, sql: str, params: Sequence[Any] = (), phase: str = "query") -> List[Any]:
    """
    Выполняет один SELECT и возвращает все строки.

    Любая ошибка драйвера (выполнение или чтение) превращается в
    DataAccessFailure; повторов нет.
    """
    try:
        with conn.cursor(cursor_factory=DictCursor) as cur:
            cur.execute(sql, params)
            return cur.fetchall()
    except psycopg2.Error as exc:
        raise DataAccessFailure(f"{phase}: {exc}") from exc
