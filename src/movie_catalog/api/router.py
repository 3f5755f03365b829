from fastapi import APIRouter
from movie_catalog.api.endpoints import movies

api_router = APIRouter()

api_router.include_router(movies.router, prefix="/movies", tags=["movies"])
