import logging
from typing import List

from ..db import fetch_all
from ..models import Actor, CoStar
from .rows import ACTING_CATEGORIES, TOP_N, like_pattern, optional_int

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ЗАПРОСЫ
# ---------------------------------------------------------------------------

# топ актёров по числу актёрских ролей
TOP_ACTORS_SQL = """
    SELECT nb.nconst      AS nconst,
           nb.primaryName AS name,
           COUNT(*)       AS movie_count
    FROM name_basics nb
    JOIN tprincipals tp ON nb.nconst = tp.person_id
    WHERE tp.category IN %s
      AND LOWER(nb.primaryName) LIKE LOWER(%s)
    GROUP BY nb.nconst, nb.primaryName
    ORDER BY movie_count DESC, nb.primaryName ASC, nb.nconst ASC
    LIMIT %s
"""

# последние фильмы; тайтлы без года не участвуют
RECENT_MOVIES_SQL = """
    SELECT tb.originalTitle AS title
    FROM tprincipals tp
    JOIN title_basics tb ON tp.movie_id = tb.tconst
    WHERE tp.person_id = %s
      AND tp.category IN %s
      AND tb.startYear IS NOT NULL
    ORDER BY tb.startYear DESC, tb.originalTitle ASC, tb.tconst ASC
    LIMIT %s
"""

# партнёры по общим тайтлам, сам актёр исключён
COSTARS_SQL = """
    SELECT nb2.primaryName               AS name,
           COUNT(DISTINCT tp1.movie_id)  AS shared_count
    FROM tprincipals tp1
    JOIN tprincipals tp2 ON tp1.movie_id = tp2.movie_id
    JOIN name_basics nb2 ON tp2.person_id = nb2.nconst
    WHERE tp1.person_id = %s
      AND tp2.person_id != tp1.person_id
      AND tp1.category IN %s
      AND tp2.category IN %s
    GROUP BY nb2.primaryName
    ORDER BY shared_count DESC, nb2.primaryName ASC
    LIMIT %s
"""


def search_actors(conn, keyword: str) -> List[Actor]:
    """
    Топ-5 актёров, в имени которых есть keyword.

    Сначала ранжирование и обрезка до 5, потом обогащение: на каждого
    актёра ещё два запроса (последние фильмы + партнёры). Поэтому запросов
    не больше 1 + 5 * 2 = 11, сколько бы людей ни совпало.
    """
    logger.info("Поиск актёров по ключевому слову %r", keyword)

    rows = fetch_all(
        conn,
        TOP_ACTORS_SQL,
        (ACTING_CATEGORIES, like_pattern(keyword), TOP_N),
        phase="top actors",
    )
    logger.debug("В топе %d актёров, загружаю фильмографии", len(rows))

    actors: List[Actor] = []
    for row in rows:
        actor = Actor(
            nconst=row["nconst"],
            name=row["name"],
            movie_count=optional_int(row, "movie_count"),
        )
        actor.played_in = fetch_recent_movies(conn, actor.nconst)
        actor.costars = fetch_costars(conn, actor.nconst)
        actors.append(actor)

    logger.debug("Поиск актёров %r: %d результатов", keyword, len(actors))
    return actors


def fetch_recent_movies(conn, nconst: str) -> List[str]:
    rows = fetch_all(
        conn,
        RECENT_MOVIES_SQL,
        (nconst, ACTING_CATEGORIES, TOP_N),
        phase="recent movies",
    )
    return [row["title"] for row in rows]


def fetch_costars(conn, nconst: str) -> List[CoStar]:
    rows = fetch_all(
        conn,
        COSTARS_SQL,
        (nconst, ACTING_CATEGORIES, ACTING_CATEGORIES, TOP_N),
        phase="costars",
    )
    return [CoStar(row["name"], row["shared_count"]) for row in rows]
