# forum/api/v1/movies.py

from typing import List
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from forum.database import get_db
from forum.schemas.movie import MovieWithGenres
from forum.services.catalog_service import AggregationStrategy, CatalogService

router = APIRouter()


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


@router.get(
    "/",
    response_model=List[MovieWithGenres],
    summary="Movies with genres",
    description="Lists every movie with its genre names.",
)
def list_movies_with_genres(
    with_genres_only: bool = Query(default=False, description="Drop movies that have no genre"),
    strategy: AggregationStrategy = Query(default=AggregationStrategy.ROWS, description="Row shape used for grouping"),
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    movies = catalog_service.movies_with_genres(strategy)
    if with_genres_only:
        movies = [entry for entry in movies if entry.genres]
    return movies
