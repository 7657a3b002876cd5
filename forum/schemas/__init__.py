# forum/schemas/__init__.py

from .movie import Movie, MovieWithGenres
from .user import UserRegister, UserLogin, CachedUser, AuthResponse
from .comment import Comment, CommentCreate
from .genre import Genre, GenreWithMovies
from .seed import GenreSeed, MovieSeed, MovieGenreSeed, SeedReport

__all__ = [
    "Movie",
    "MovieWithGenres",
    "UserRegister",
    "UserLogin",
    "CachedUser",
    "AuthResponse",
    "Comment",
    "CommentCreate",
    "Genre",
    "GenreWithMovies",
    "GenreSeed",
    "MovieSeed",
    "MovieGenreSeed",
    "SeedReport",
]
