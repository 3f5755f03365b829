import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.common.utils.date_utils import parse_release_date
from movie_catalog.db.entity.movie import Movie
from movie_catalog.models.request.movie_request import MovieCreate, MovieUpdate
from movie_catalog.repositories.movie_repository import MovieRepository

logger = logging.getLogger(__name__)


class MovieService:
    def __init__(self, db: AsyncSession, repository: Optional[MovieRepository] = None):
        self.db = db
        self.repository = repository or MovieRepository(db)

    async def list_movies(self) -> List[Movie]:
        return await self.repository.list_ordered_by_title()

    async def register(self, movie_in: MovieCreate) -> Optional[Movie]:
        """登记新影片

        Returns:
            新建的影片；标题（不区分大小写）已存在时返回 None
        """
        if await self.repository.get_by_title(movie_in.title):
            logger.info(f"影片已存在: {movie_in.title}")
            return None

        movie = Movie(
            title=movie_in.title,
            genre_id=movie_in.genre_id,
            language_id=movie_in.language_id,
            oscar_count=movie_in.oscar_count,
            release_date=parse_release_date(movie_in.release_date),
        )
        try:
            movie = await self.repository.create_async(movie)
        except IntegrityError:
            # 并发登记同名影片时由唯一索引兜底
            await self.repository.rollback()
            if await self.repository.get_by_title(movie_in.title):
                logger.warning(f"唯一索引拦截了重复影片: {movie_in.title}")
                return None
            raise

        logger.info(f"影片登记成功: {movie.id} {movie.title}")
        return movie

    async def update(self, movie_id: int, movie_in: MovieUpdate) -> Optional[Movie]:
        """只更新请求体中出现的字段，影片不存在时返回 None"""
        movie = await self.repository.get_by_id(movie_id)
        if not movie:
            return None

        update_data = movie_in.model_dump(exclude_unset=True)
        release_date = update_data.pop("release_date", None)
        if release_date:
            update_data["release_date"] = parse_release_date(release_date)

        movie = await self.repository.update_async(movie, update_data)
        logger.info(f"影片更新成功: {movie_id} 字段: {sorted(update_data)}")
        return movie

    async def delete(self, movie_id: int) -> Optional[Movie]:
        movie = await self.repository.get_by_id(movie_id)
        if not movie:
            return None

        await self.repository.delete_async(movie)
        logger.info(f"影片已删除: {movie_id}")
        return movie

    async def list_by_genre_name(self, genre_name: str) -> List[Movie]:
        return await self.repository.list_by_genre_name(genre_name)
