from movie_catalog.db.entity.base import DBBaseModel
from movie_catalog.db.entity.genre import Genre
from movie_catalog.db.entity.language import Language
from movie_catalog.db.entity.movie import Movie

__all__ = ["DBBaseModel", "Genre", "Language", "Movie"]
