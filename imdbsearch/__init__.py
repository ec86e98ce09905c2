from .errors import DataAccessFailure
from .models import Actor, CoStar, Movie
from .services import search_actors, search_movies

__all__ = [
    "DataAccessFailure",
    "Actor",
    "CoStar",
    "Movie",
    "search_actors",
    "search_movies",
]
