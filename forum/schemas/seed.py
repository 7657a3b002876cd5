# forum/schemas/seed.py

from typing import Optional
from pydantic import BaseModel, Field


class GenreSeed(BaseModel):
    name: str = Field(min_length=1)


class MovieSeed(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    release_date: Optional[str] = None
    image_url: Optional[str] = None


class MovieGenreSeed(BaseModel):
    movie_id: int
    genre_id: int


class SeedReport(BaseModel):
    """Counts of records inserted and skipped by one seeding run"""

    genres_inserted: int = 0
    genres_skipped: int = 0
    movies_inserted: int = 0
    movies_skipped: int = 0
    links_inserted: int = 0
    links_skipped: int = 0
