import logging
from typing import List

from ..db import fetch_all
from ..models import Movie
from .rows import ACTING_CATEGORIES, like_pattern, optional_int, parse_genres

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ЗАПРОСЫ
# ---------------------------------------------------------------------------

MOVIES_SQL = """
    SELECT tb.tconst        AS tconst,
           tb.originalTitle AS title,
           tb.startYear     AS start_year,
           tb.genres        AS genres
    FROM title_basics tb
    WHERE LOWER(tb.originalTitle) LIKE LOWER(%s)
      AND tb.originalTitle IS NOT NULL
    ORDER BY tb.originalTitle ASC, tb.startYear ASC NULLS LAST, tb.tconst ASC
"""

CAST_SQL = """
    SELECT nb.primaryName AS name
    FROM tprincipals tp
    JOIN name_basics nb ON tp.person_id = nb.nconst
    WHERE tp.movie_id = %s
      AND tp.category IN %s
    ORDER BY nb.primaryName ASC
"""


def search_movies(conn, keyword: str) -> List[Movie]:
    """
    Фильмы, в названии которых есть keyword (без учёта регистра).

    1) один запрос по title_basics;
    2) по запросу на каждый найденный тайтл — актёрский состав.

    Итого 1 + N запросов. Ошибка на любом шаге прерывает весь поиск
    (DataAccessFailure), частичный список не возвращается.
    """
    logger.info("Поиск фильмов по ключевому слову %r", keyword)

    rows = fetch_all(conn, MOVIES_SQL, (like_pattern(keyword),), phase="movies")
    logger.debug("Найдено %d тайтлов, загружаю составы", len(rows))

    movies: List[Movie] = []
    for row in rows:
        movie = Movie(
            tconst=row["tconst"],
            title=row["title"],
            year=optional_int(row, "start_year"),
            genres=parse_genres(row["genres"]),
        )
        movie.actor_names = fetch_cast(conn, movie.tconst)
        movies.append(movie)

    logger.debug("Поиск фильмов %r: %d результатов", keyword, len(movies))
    return movies


def fetch_cast(conn, tconst: str) -> List[str]:
    rows = fetch_all(conn, CAST_SQL, (tconst, ACTING_CATEGORIES), phase="cast")
    return [row["name"] for row in rows]
