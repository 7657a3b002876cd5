# forum/models/__init__.py

from .movie import MovieModel
from .user import UserModel
from .genre import GenreModel
from .movie_genre import MovieGenreModel
from .comment import CommentModel


__all__ = [
    "MovieModel",
    "UserModel",
    "GenreModel",
    "MovieGenreModel",
    "CommentModel",
]
