# forum/schemas/movie.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    movie_id: int = Field(description="Movie ID")
    title: str = Field(description="Title")
    description: Optional[str] = Field(default=None, description="Synopsis")
    release_date: Optional[str] = Field(default=None, description="Release date as stored")
    image_url: Optional[str] = Field(default=None, description="Poster image reference")


class MovieWithGenres(BaseModel):
    movie: Movie = Field(description="Movie")
    genres: List[str] = Field(default_factory=list, description="Genre names, first-seen order")
