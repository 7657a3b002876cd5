# forum/schemas/genre.py

from typing import List
from pydantic import BaseModel, ConfigDict, Field

class Genre(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    genre_id: int = Field(description="Genre ID")
    name: str = Field(description="Genre name")

class GenreWithMovies(BaseModel):
    genre: Genre = Field(description="Genre")
    movies: List[str] = Field(default_factory=list, description="Distinct movie titles, first-seen order")
