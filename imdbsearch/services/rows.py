from typing import Any, FrozenSet, Mapping, Optional

from ..models import NO_DATA

ACTING_CATEGORIES = ("actor", "actress")

# фиксированный топ — не настраивается
TOP_N = 5


def optional_int(row: Mapping[str, Any], key: str) -> Optional[int]:
    """
    NULL → None, всё остальное → int.

    «Неизвестно» не должно превращаться в 0.
    """
    value = row[key]
    if value is None:
        return None
    return int(value)


def parse_genres(raw: Optional[str]) -> FrozenSet[str]:
    """
    "Action,Drama" → {"Action", "Drama"}
    "\\N" / NULL   → пустое множество
    """
    if raw is None or raw == NO_DATA:
        return frozenset()
    return frozenset(raw.split(","))


def like_pattern(keyword: str) -> str:
    """
    Ключевое слово → шаблон для LOWER(col) LIKE LOWER(%s).

    Регистр приводит сам PostgreSQL (с обеих сторон), здесь только
    экранируются метасимволы LIKE, поэтому совпадение — обычная подстрока.
    Пустая строка даёт '%%' и совпадает со всеми строками.
    """
    escaped = (
        keyword
        .replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    return f"%{escaped}%"
