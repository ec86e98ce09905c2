# python -m imdbsearch movies matrix
# python -m imdbsearch actors reeves

import logging
import sys

from .db import get_connection
from .errors import DataAccessFailure
from .log import setup_logging
from .services import search_actors, search_movies

USAGE = "usage: python -m imdbsearch {movies|actors} KEYWORD"

logger = logging.getLogger(__name__)


def print_movies(movies):
    for movie in movies:
        genres = ", ".join(sorted(movie.genres)) or "-"
        print(f"→ {movie.tconst}  {movie}  [{genres}]")
        for name in movie.actor_names:
            print(f"    {name}")
    print(f"✓ найдено фильмов: {len(movies)}")


def print_actors(actors):
    for actor in actors:
        print(f"→ {actor.nconst}  {actor.name}  (ролей: {actor.movie_count})")
        for title in actor.played_in:
            print(f"    фильм:   {title}")
        for costar in actor.costars:
            print(f"    партнёр: {costar.name} ×{costar.count}")
    print(f"✓ найдено актёров: {len(actors)}")


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 2 or argv[0] not in ("movies", "actors"):
        print(USAGE, file=sys.stderr)
        return 2

    setup_logging()
    command, keyword = argv

    try:
        conn = get_connection()
    except DataAccessFailure as exc:
        logger.error("Нет соединения с базой: %s", exc)
        return 1

    try:
        if command == "movies":
            print_movies(search_movies(conn, keyword))
        else:
            print_actors(search_actors(conn, keyword))
    except DataAccessFailure as exc:
        logger.error("Поиск %s %r прерван: %s", command, keyword, exc)
        return 1
    finally:
        conn.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
