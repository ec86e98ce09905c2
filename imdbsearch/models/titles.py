from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

# маркер «нет данных» в дампах IMDb
NO_DATA = "\\N"


@dataclass
class Movie:
    """
    Тайтл из title_basics + актёрский состав.

    actor_names отсортирован по имени (ASC), дубликаты не убираются.
    """

    tconst: str
    title: str
    year: Optional[int] = None
    genres: FrozenSet[str] = frozenset()
    actor_names: List[str] = field(default_factory=list)

    def __str__(self):
        return f"{self.title} ({self.year})"
