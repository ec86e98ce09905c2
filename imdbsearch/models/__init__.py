from .actors import Actor, CoStar
from .titles import Movie, NO_DATA

__all__ = [
    "Actor",
    "CoStar",
    "Movie",
    "NO_DATA",
]
