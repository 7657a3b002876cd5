# forum/api/v1/genres.py

from typing import List
from fastapi import APIRouter, Depends, Query
from forum.api.v1.movies import get_catalog_service
from forum.schemas.genre import GenreWithMovies
from forum.services.catalog_service import AggregationStrategy, CatalogService

router = APIRouter()

@router.get(
    "/",
    response_model=List[GenreWithMovies],
    summary="Genres with movies",
    description="Lists every genre with the distinct titles tagged with it."
)
def list_genres_with_movies(
    strategy: AggregationStrategy = Query(default=AggregationStrategy.ROWS, description="Row shape used for grouping"),
    catalog_service: CatalogService = Depends(get_catalog_service)
):
    return catalog_service.genres_with_movies(strategy)
