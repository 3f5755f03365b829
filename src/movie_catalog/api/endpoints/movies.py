import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.exc import SQLAlchemyError

from movie_catalog.api.deps import get_services
from movie_catalog.models.request.movie_request import MovieCreate, MovieUpdate
from movie_catalog.models.response.message_response import MessageResponse
from movie_catalog.models.response.movie_response import MovieResponse
from movie_catalog.services import ServiceFactory

logger = logging.getLogger(__name__)

router = APIRouter()

MOVIE_ALREADY_REGISTERED = "movie already registered"
MOVIE_REGISTERED = "movie registered successfully"
MOVIE_REGISTER_FAILED = "error registering movie"
MOVIE_NOT_FOUND = "movie not found"
MOVIE_UPDATED = "movie updated successfully"
MOVIE_UPDATE_FAILED = "error updating movie"
MOVIE_DELETED = "movie deleted successfully"
MOVIE_DELETE_FAILED = "error deleting movie"
NO_MOVIE_FOR_GENRE = "no movie found with this genre"
MOVIE_SEARCH_FAILED = "error searching movies"

# 日期解析失败与数据库错误同样按 500 处理
STORE_ERRORS = (SQLAlchemyError, ValueError, TypeError)


@router.get("", response_model=List[MovieResponse])
async def get_movies(services: ServiceFactory = Depends(get_services)):
    """
    Retrieve all movies ordered by title.
    """
    return await services.movie_service.list_movies()


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_movie(
    movie_in: MovieCreate,
    services: ServiceFactory = Depends(get_services)
):
    """
    Register a new movie. Titles are unique regardless of case.
    """
    try:
        movie = await services.movie_service.register(movie_in)
    except STORE_ERRORS as e:
        logger.error(f"登记影片失败: {movie_in.title} - {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=MOVIE_REGISTER_FAILED
        )
    if movie is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=MOVIE_ALREADY_REGISTERED
        )
    return MessageResponse(message=MOVIE_REGISTERED)


@router.put("/{movie_id}", response_model=MessageResponse)
async def update_movie(
    movie_in: MovieUpdate,
    movie_id: int = Path(..., title="The ID of the movie to update"),
    services: ServiceFactory = Depends(get_services)
):
    """
    Update the fields present in the body. Omitted fields keep their value.
    """
    try:
        movie = await services.movie_service.update(movie_id, movie_in)
    except STORE_ERRORS as e:
        logger.error(f"更新影片失败: {movie_id} - {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=MOVIE_UPDATE_FAILED
        )
    if not movie:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=MOVIE_NOT_FOUND
        )
    return MessageResponse(message=MOVIE_UPDATED)


@router.delete("/{movie_id}", response_model=MessageResponse)
async def delete_movie(
    movie_id: int = Path(..., title="The ID of the movie to delete"),
    services: ServiceFactory = Depends(get_services)
):
    """
    Delete movie.
    """
    try:
        movie = await services.movie_service.delete(movie_id)
    except SQLAlchemyError as e:
        logger.error(f"删除影片失败: {movie_id} - {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=MOVIE_DELETE_FAILED
        )
    if not movie:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=MOVIE_NOT_FOUND
        )
    return MessageResponse(message=MOVIE_DELETED)


@router.get("/{genre_name}", response_model=List[MovieResponse])
async def get_movies_by_genre(
    genre_name: str = Path(..., title="The genre name, matched regardless of case"),
    services: ServiceFactory = Depends(get_services)
):
    """
    Get all movies of a genre.
    """
    try:
        movies = await services.movie_service.list_by_genre_name(genre_name)
    except SQLAlchemyError as e:
        logger.error(f"按类型查询影片失败: {genre_name} - {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=MOVIE_SEARCH_FAILED
        )
    if not movies:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NO_MOVIE_FOR_GENRE
        )
    return movies
