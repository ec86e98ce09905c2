from .actors import search_actors
from .movies import search_movies

__all__ = [
    "search_actors",
    "search_movies",
]
