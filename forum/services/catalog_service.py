# forum/services/catalog_service.py

import enum
import logging
from typing import Dict, List
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from forum.core.errors import QueryError
from forum.models.genre import GenreModel
from forum.models.movie import MovieModel
from forum.models.movie_genre import MovieGenreModel
from forum.schemas.genre import Genre, GenreWithMovies
from forum.schemas.movie import Movie, MovieWithGenres
from forum.services.grouping import GroupedNames

logger = logging.getLogger(__name__)

# ASCII unit separator; cannot appear in a title or genre name typed by a person
CONCAT_SEPARATOR = "\x1f"

MOVIE_COLUMNS = (
    MovieModel.movie_id,
    MovieModel.title,
    MovieModel.description,
    MovieModel.release_date,
    MovieModel.image_url,
)


class AggregationStrategy(str, enum.Enum):
    # one row per (parent, child) pair, folded client side
    ROWS = "rows"
    # one row per parent, child names concatenated by the store
    CONCAT = "concat"


class CatalogService:
    """Nested movie/genre views built from the movie_genre link table.

    Every call runs exactly one query and folds its rows into a
    ``GroupedNames``; any store error aborts the call with ``QueryError``.
    """

    def __init__(self, db: Session):
        self.db = db

    def movies_with_genres(
        self, strategy: AggregationStrategy = AggregationStrategy.ROWS
    ) -> List[MovieWithGenres]:
        """Every movie with the names of its genres"""
        movies: Dict[int, Movie] = {}
        grouped = GroupedNames()
        strategy = self._effective_strategy(strategy)
        try:
            if strategy is AggregationStrategy.CONCAT:
                stmt = (
                    select(*MOVIE_COLUMNS, self._concat(GenreModel.name).label("genre_names"))
                    .outerjoin(MovieGenreModel, MovieModel.movie_id == MovieGenreModel.movie_id)
                    .outerjoin(GenreModel, MovieGenreModel.genre_id == GenreModel.genre_id)
                    .group_by(*MOVIE_COLUMNS)
                )
                for row in self.db.execute(stmt):
                    if grouped.add_parent(row.movie_id):
                        movies[row.movie_id] = self._build_movie(row)
                    grouped.add_joined(row.movie_id, row.genre_names, CONCAT_SEPARATOR)
            else:
                stmt = (
                    select(*MOVIE_COLUMNS, GenreModel.name.label("genre_name"))
                    .outerjoin(MovieGenreModel, MovieModel.movie_id == MovieGenreModel.movie_id)
                    .outerjoin(GenreModel, MovieGenreModel.genre_id == GenreModel.genre_id)
                )
                for row in self.db.execute(stmt):
                    if grouped.add_parent(row.movie_id):
                        movies[row.movie_id] = self._build_movie(row)
                    grouped.add(row.movie_id, row.genre_name)
        except SQLAlchemyError as e:
            logger.error("Movie aggregation failed: %s", e)
            raise QueryError(f"Failed to load movies with genres: {e.__class__.__name__}") from e

        return [
            MovieWithGenres(movie=movies[movie_id], genres=grouped.names(movie_id))
            for movie_id in grouped
        ]

    def genres_with_movies(
        self, strategy: AggregationStrategy = AggregationStrategy.ROWS
    ) -> List[GenreWithMovies]:
        """Every genre with the distinct titles linked to it"""
        genres: Dict[int, Genre] = {}
        grouped = GroupedNames()
        strategy = self._effective_strategy(strategy)
        try:
            if strategy is AggregationStrategy.CONCAT:
                stmt = (
                    select(
                        GenreModel.genre_id,
                        GenreModel.name,
                        self._concat(MovieModel.title).label("movie_titles"),
                    )
                    .outerjoin(MovieGenreModel, GenreModel.genre_id == MovieGenreModel.genre_id)
                    .outerjoin(MovieModel, MovieGenreModel.movie_id == MovieModel.movie_id)
                    .group_by(GenreModel.genre_id, GenreModel.name)
                )
                for row in self.db.execute(stmt):
                    if grouped.add_parent(row.genre_id):
                        genres[row.genre_id] = Genre(genre_id=row.genre_id, name=row.name)
                    grouped.add_joined(row.genre_id, row.movie_titles, CONCAT_SEPARATOR)
            else:
                stmt = (
                    select(GenreModel.genre_id, GenreModel.name, MovieModel.title)
                    .outerjoin(MovieGenreModel, GenreModel.genre_id == MovieGenreModel.genre_id)
                    .outerjoin(MovieModel, MovieGenreModel.movie_id == MovieModel.movie_id)
                )
                for row in self.db.execute(stmt):
                    if grouped.add_parent(row.genre_id):
                        genres[row.genre_id] = Genre(genre_id=row.genre_id, name=row.name)
                    grouped.add(row.genre_id, row.title)
        except SQLAlchemyError as e:
            logger.error("Genre aggregation failed: %s", e)
            raise QueryError(f"Failed to load genres with movies: {e.__class__.__name__}") from e

        return [
            GenreWithMovies(genre=genres[genre_id], movies=grouped.names(genre_id))
            for genre_id in grouped
        ]

    # helpers
    def _dialect_name(self) -> str:
        return self.db.get_bind().dialect.name

    def _effective_strategy(self, strategy: AggregationStrategy) -> AggregationStrategy:
        strategy = AggregationStrategy(strategy)
        if strategy is AggregationStrategy.CONCAT and self._dialect_name() not in ("sqlite", "postgresql"):
            # MySQL's GROUP_CONCAT takes its separator as a keyword, not an argument
            logger.debug("concat aggregation unsupported on %s, grouping rows instead", self._dialect_name())
            return AggregationStrategy.ROWS
        return strategy

    def _concat(self, column):
        if self._dialect_name() == "postgresql":
            return func.string_agg(column, CONCAT_SEPARATOR)
        return func.group_concat(column, CONCAT_SEPARATOR)

    def _build_movie(self, row) -> Movie:
        return Movie(
            movie_id=row.movie_id,
            title=row.title,
            description=row.description,
            release_date=row.release_date,
            image_url=row.image_url,
        )
