# forum/api/v1/__init__.py

from fastapi import APIRouter
from . import auth, comments, genres, movies, system

# (router, prefix, tags)
ROUTES = (
    (auth.router, "/auth", ["auth"]),
    (comments.router, "/comments", ["comments"]),
    (movies.router, "/movies", ["movies"]),
    (genres.router, "/genres", ["genres"]),
    (system.router, "/system", ["system"]),
)


def build_api_router(routes=ROUTES) -> APIRouter:
    """Assemble the v1 router from an explicit route table"""
    api_router = APIRouter()
    for router, prefix, tags in routes:
        api_router.include_router(router, prefix=prefix, tags=tags)
    return api_router
