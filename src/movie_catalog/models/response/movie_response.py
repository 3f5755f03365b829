from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from movie_catalog.models.response.genre_response import GenreResponse
from movie_catalog.models.response.language_response import LanguageResponse


class MovieResponse(BaseModel):
    id: int
    title: str
    genre_id: int
    language_id: int
    oscar_count: int
    release_date: Optional[datetime] = None
    genre: GenreResponse
    language: LanguageResponse

    model_config = ConfigDict(from_attributes=True)
