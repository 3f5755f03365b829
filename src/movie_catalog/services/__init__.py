from sqlalchemy.ext.asyncio import AsyncSession

from .movie_service import MovieService


class ServiceFactory:
    """服务工厂类，用于创建和管理所有服务实例"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self._movie_service = None

    @property
    def movie_service(self) -> MovieService:
        if not self._movie_service:
            self._movie_service = MovieService(self.db)
        return self._movie_service
