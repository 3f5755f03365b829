from movie_catalog.repositories.base_repository import BaseRepositoryAsync
from movie_catalog.repositories.movie_repository import MovieRepository

__all__ = ["BaseRepositoryAsync", "MovieRepository"]
