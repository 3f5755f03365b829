from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.db.entity.genre import Genre
from movie_catalog.db.entity.movie import Movie
from movie_catalog.repositories.base_repository import BaseRepositoryAsync


class MovieRepository(BaseRepositoryAsync[Movie, int]):
    def __init__(self, db: AsyncSession):
        super().__init__(db)

    async def list_ordered_by_title(self) -> List[Movie]:
        """按标题升序获取全部影片"""
        result = await self.db.execute(select(Movie).order_by(Movie.title.asc(), Movie.id.asc()))
        return list(result.scalars().all())

    async def get_by_title(self, title: str) -> Optional[Movie]:
        """根据标题获取影片，不区分大小写"""
        query = select(Movie).where(func.lower(Movie.title) == func.lower(title)).limit(1)
        result = await self.db.execute(query)
        return result.scalars().first()

    async def list_by_genre_name(self, genre_name: str) -> List[Movie]:
        """获取类型名称匹配（不区分大小写）的所有影片"""
        query = (
            select(Movie)
            .join(Genre, Movie.genre_id == Genre.id)
            .where(func.lower(Genre.name) == func.lower(genre_name))
            .order_by(Movie.title.asc(), Movie.id.asc())
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())
