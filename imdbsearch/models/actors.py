from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional


class CoStar(NamedTuple):
    name: str
    count: int


@dataclass
class Actor:
    """
    Актёр из name_basics с фильмографией и частыми партнёрами.

    played_in — до 5 последних тайтлов (год DESC, название ASC).
    costars   — до 5 партнёров по числу общих тайтлов (count DESC, имя ASC).
    """

    nconst: str
    name: str
    movie_count: Optional[int] = None
    played_in: List[str] = field(default_factory=list)
    costars: List[CoStar] = field(default_factory=list)

    @property
    def costar_name_to_count(self) -> Dict[str, int]:
        # dict сохраняет порядок вставки → порядок рейтинга не теряется
        return {c.name: c.count for c in self.costars}

    def __str__(self):
        return self.name
