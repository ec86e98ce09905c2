import re
from collections import defaultdict

import psycopg2
import pytest

from imdbsearch.services.actors import COSTARS_SQL, RECENT_MOVIES_SQL, TOP_ACTORS_SQL
from imdbsearch.services.movies import CAST_SQL, MOVIES_SQL


def like_to_regex(pattern):
    """LIKE-шаблон с экранированием через '\\' → регулярка."""
    out = []
    chars = iter(pattern)
    for ch in chars:
        if ch == "\\":
            out.append(re.escape(next(chars)))
        elif ch == "%":
            out.append(".*")
        elif ch == "_":
            out.append(".")
        else:
            out.append(re.escape(ch))
    return re.compile("".join(out), re.S)


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self._rows = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=()):
        self.conn.executed.append((sql, params))
        if sql in self.conn.fail_on:
            raise psycopg2.OperationalError("server closed the connection unexpectedly")
        self._rows = self.conn.handlers[sql](*params)

    def fetchall(self):
        return list(self._rows)


class FakeImdb:
    """
    Соединение в памяти вместо PostgreSQL.

    Каждый запрос сервисов эмулируется на Python над тремя таблицами:
      titles:     [(tconst, original_title, start_year, genres)]
      people:     [(nconst, primary_name)]
      principals: [(movie_id, person_id, category)]
    """

    def __init__(self, titles=(), people=(), principals=(), fail_on=()):
        self.titles = list(titles)
        self.people = dict(people)
        self.principals = list(principals)
        self.fail_on = set(fail_on)
        self.executed = []
        self.closed = False
        self.handlers = {
            MOVIES_SQL: self._movies,
            CAST_SQL: self._cast,
            TOP_ACTORS_SQL: self._top_actors,
            RECENT_MOVIES_SQL: self._recent_movies,
            COSTARS_SQL: self._costars,
        }

    def cursor(self, cursor_factory=None):
        return FakeCursor(self)

    def close(self):
        self.closed = True

    @property
    def query_count(self):
        return len(self.executed)

    def _title(self, tconst):
        for t in self.titles:
            if t[0] == tconst:
                return t
        return None

    def _movies(self, pattern):
        regex = like_to_regex(pattern.lower())
        found = [
            t for t in self.titles
            if t[1] is not None and regex.fullmatch(t[1].lower())
        ]
        found.sort(key=lambda t: (t[1], t[2] is None, t[2] or 0, t[0]))
        return [
            {"tconst": t[0], "title": t[1], "start_year": t[2], "genres": t[3]}
            for t in found
        ]

    def _cast(self, tconst, categories):
        names = [
            self.people[person_id]
            for movie_id, person_id, category in self.principals
            if movie_id == tconst and category in categories
        ]
        return [{"name": n} for n in sorted(names)]

    def _top_actors(self, categories, pattern, limit):
        regex = like_to_regex(pattern.lower())
        counts = defaultdict(int)
        for _, person_id, category in self.principals:
            if category in categories and regex.fullmatch(self.people[person_id].lower()):
                counts[person_id] += 1
        ranked = sorted(counts.items(), key=lambda kv: (-kv[1], self.people[kv[0]], kv[0]))
        return [
            {"nconst": nconst, "name": self.people[nconst], "movie_count": count}
            for nconst, count in ranked[:limit]
        ]

    def _recent_movies(self, nconst, categories, limit):
        titles = []
        for movie_id, person_id, category in self.principals:
            title = self._title(movie_id)
            if person_id == nconst and category in categories and title and title[2] is not None:
                titles.append(title)
        titles.sort(key=lambda t: (-t[2], t[1], t[0]))
        return [{"title": t[1]} for t in titles[:limit]]

    def _costars(self, nconst, categories_1, categories_2, limit):
        own_movies = {
            movie_id for movie_id, person_id, category in self.principals
            if person_id == nconst and category in categories_1
        }
        shared = defaultdict(set)
        for movie_id, person_id, category in self.principals:
            if movie_id in own_movies and person_id != nconst and category in categories_2:
                shared[self.people[person_id]].add(movie_id)
        ranked = sorted(shared.items(), key=lambda kv: (-len(kv[1]), kv[0]))
        return [{"name": name, "shared_count": len(movies)} for name, movies in ranked[:limit]]


TITLES = [
    ("tt0133093", "The Matrix", 1999, "Action,Sci-Fi"),
    ("tt0234215", "The Matrix Reloaded", 2003, "Action,Sci-Fi"),
    ("tt0000001", "Matrix", None, "\\N"),
    ("tt0000003", "Matrix", 1990, "Drama"),
    ("tt0000002", None, 2001, "Drama"),
    ("tt0111257", "Speed", 1994, "Action,Crime,Thriller"),
]

PEOPLE = [
    ("nm0000206", "Keanu Reeves"),
    ("nm0005251", "Carrie-Anne Moss"),
    ("nm0000401", "Laurence Fishburne"),
    ("nm0915989", "Hugo Weaving"),
    ("nm0905154", "Lana Wachowski"),
    ("nm0000113", "Sandra Bullock"),
    ("nm0000002", "Reeves Nobody"),
]

PRINCIPALS = [
    ("tt0133093", "nm0000206", "actor"),
    ("tt0133093", "nm0005251", "actress"),
    ("tt0133093", "nm0000401", "actor"),
    ("tt0133093", "nm0915989", "actor"),
    ("tt0133093", "nm0905154", "director"),
    ("tt0234215", "nm0000206", "actor"),
    ("tt0234215", "nm0005251", "actress"),
    ("tt0234215", "nm0000401", "actor"),
    ("tt0234215", "nm0915989", "actor"),
    ("tt0000001", "nm0000206", "actor"),
    ("tt0000003", "nm0915989", "actor"),
    ("tt0111257", "nm0000206", "actor"),
    ("tt0111257", "nm0000113", "actress"),
    ("tt0111257", "nm0000002", "writer"),
]


@pytest.fixture
def make_db():
    def factory(titles=TITLES, people=PEOPLE, principals=PRINCIPALS, fail_on=()):
        return FakeImdb(titles, people, principals, fail_on)
    return factory


@pytest.fixture
def imdb(make_db):
    return make_db()


@pytest.fixture
def imdb_rows():
    return TITLES, PEOPLE, PRINCIPALS
