from typing import Optional
from pydantic import BaseModel


class MovieCreate(BaseModel):
    title: str
    genre_id: int
    language_id: int
    oscar_count: int
    release_date: str


class MovieUpdate(BaseModel):
    title: Optional[str] = None
    genre_id: Optional[int] = None
    language_id: Optional[int] = None
    oscar_count: Optional[int] = None
    release_date: Optional[str] = None
