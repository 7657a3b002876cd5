# forum/services/seed_service.py

import logging
from pathlib import Path
from typing import List, Sequence, Type, TypeVar
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from forum.core.errors import PersistenceError, ValidationError
from forum.models.genre import GenreModel
from forum.models.movie import MovieModel
from forum.models.movie_genre import MovieGenreModel
from forum.schemas.seed import GenreSeed, MovieSeed, MovieGenreSeed, SeedReport
from forum.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

GENRES_FILE = "genres.json"
MOVIES_FILE = "movies.json"
MOVIE_GENRE_FILE = "movie_genre.json"

SeedT = TypeVar("SeedT", bound=BaseModel)


def load_seed_file(path: Path, record_type: Type[SeedT]) -> List[SeedT]:
    """Parse one JSON list of seed records"""
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ValidationError(f"Cannot read seed file {path.name}: {e.strerror}") from e
    try:
        return TypeAdapter(List[record_type]).validate_json(raw)
    except SchemaValidationError as e:
        raise ValidationError(f"Malformed seed file {path.name}: {e.error_count()} error(s)") from e


class SeedService:
    """Idempotent bootstrap of genres, movies and their links.

    Every record is looked up by its natural key (genre name, movie title,
    movie/genre id pair) and inserted only when absent, so running the same
    seed twice leaves the store unchanged. Records are committed one by one.
    The first failed insert aborts the run; records committed before it stay.
    """

    def __init__(self, db: Session):
        self.db = db

    def seed_from_directory(self, seed_dir: Path) -> SeedReport:
        seed_dir = Path(seed_dir)
        genres = load_seed_file(seed_dir / GENRES_FILE, GenreSeed)
        movies = load_seed_file(seed_dir / MOVIES_FILE, MovieSeed)
        links = load_seed_file(seed_dir / MOVIE_GENRE_FILE, MovieGenreSeed)
        return self.ingest(genres, movies, links)

    def ingest(
        self,
        genres: Sequence[GenreSeed],
        movies: Sequence[MovieSeed],
        links: Sequence[MovieGenreSeed],
    ) -> SeedReport:
        report = SeedReport()

        for genre in genres:
            if self._exists(select(GenreModel.genre_id).where(GenreModel.name == genre.name)):
                logger.debug("Genre %s already exists, skipping", genre.name)
                report.genres_skipped += 1
                continue
            self._insert(GenreModel(name=genre.name), f"genre {genre.name}")
            report.genres_inserted += 1

        for movie in movies:
            if self._exists(select(MovieModel.movie_id).where(MovieModel.title == movie.title)):
                logger.debug("Movie %s already exists, skipping", movie.title)
                report.movies_skipped += 1
                continue
            self._insert(
                MovieModel(
                    title=movie.title,
                    description=movie.description,
                    release_date=movie.release_date,
                    image_url=movie.image_url,
                ),
                f"movie {movie.title}",
            )
            report.movies_inserted += 1

        for link in links:
            stmt = select(MovieGenreModel.movie_id).where(
                MovieGenreModel.movie_id == link.movie_id,
                MovieGenreModel.genre_id == link.genre_id,
            )
            if self._exists(stmt):
                report.links_skipped += 1
                continue
            self._insert(
                MovieGenreModel(movie_id=link.movie_id, genre_id=link.genre_id),
                f"movie_genre movie_id={link.movie_id} genre_id={link.genre_id}",
            )
            report.links_inserted += 1

        logger.info(
            "Seeding done: genres +%s/=%s movies +%s/=%s links +%s/=%s",
            report.genres_inserted,
            report.genres_skipped,
            report.movies_inserted,
            report.movies_skipped,
            report.links_inserted,
            report.links_skipped,
        )
        return report

    def log_catalog(self) -> None:
        """Log the movies that have genres and every genre with its movies"""
        catalog = CatalogService(self.db)
        for entry in catalog.movies_with_genres():
            if entry.genres:
                logger.info("Movie: %s, Genres: %s", entry.movie.title, entry.genres)
        for entry in catalog.genres_with_movies():
            logger.info("Genre: %s, Movies: %s", entry.genre.name, entry.movies)

    # helpers
    def _exists(self, stmt) -> bool:
        try:
            return self.db.execute(stmt).first() is not None
        except SQLAlchemyError as e:
            raise PersistenceError(f"Seed lookup failed: {e.__class__.__name__}") from e

    def _insert(self, model, label: str) -> None:
        try:
            self.db.add(model)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to insert %s: %s", label, e)
            raise PersistenceError(f"Failed to insert {label}") from e
        logger.info("Inserted %s", label)
