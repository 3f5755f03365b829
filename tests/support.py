"""API 测试的公共基类：每个用例使用独立的临时 SQLite 数据库"""

import asyncio
import os
import tempfile
import unittest
from typing import Any, Dict, Optional

from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from movie_catalog import create_app
from movie_catalog.api.deps import get_db
from movie_catalog.config.database import Base, build_session_factory
from movie_catalog.config.settings import Settings
from movie_catalog.db.entity import Genre, Language, Movie


class CatalogApiTestCase(unittest.TestCase):
    """启动应用并把 get_db 指向临时数据库

    预置类型: 1 Drama, 2 Science Fiction, 3 Comedy
    预置语言: 1 English, 2 Portuguese
    """

    def setUp(self):
        fd, self.db_path = tempfile.mkstemp(suffix=".db")
        os.close(fd)
        self.engine = create_async_engine(
            f"sqlite+aiosqlite:///{self.db_path}", poolclass=NullPool
        )
        self.session_factory = build_session_factory(self.engine)
        self.run_async(self._create_schema())

        self.app = create_app(Settings(API_PREFIX=""))

        async def override_get_db():
            async with self.session_factory() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
                finally:
                    await session.close()

        self.app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(self.app)

    def tearDown(self):
        self.client.close()
        self.run_async(self.engine.dispose())
        os.remove(self.db_path)

    @staticmethod
    def run_async(coro):
        return asyncio.run(coro)

    async def _create_schema(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with self.session_factory() as session:
            session.add_all([
                Genre(id=1, name="Drama"),
                Genre(id=2, name="Science Fiction"),
                Genre(id=3, name="Comedy"),
                Language(id=1, name="English"),
                Language(id=2, name="Portuguese"),
            ])
            await session.commit()

    def movie_payload(self, title: str, **overrides: Any) -> Dict[str, Any]:
        payload = {
            "title": title,
            "genre_id": 2,
            "language_id": 1,
            "oscar_count": 0,
            "release_date": "2021-10-22",
        }
        payload.update(overrides)
        return payload

    def create_movie(self, title: str, **overrides: Any):
        return self.client.post("/movies", json=self.movie_payload(title, **overrides))

    def count_movies(self) -> int:
        async def _count():
            async with self.session_factory() as session:
                result = await session.execute(select(func.count()).select_from(Movie))
                return result.scalar()
        return self.run_async(_count())

    def fetch_movie(self, movie_id: int) -> Optional[Movie]:
        async def _fetch():
            async with self.session_factory() as session:
                result = await session.execute(select(Movie).where(Movie.id == movie_id))
                return result.scalars().first()
        return self.run_async(_fetch())

    def movie_id_by_title(self, title: str) -> int:
        async def _fetch():
            async with self.session_factory() as session:
                result = await session.execute(select(Movie.id).where(Movie.title == title))
                return result.scalar_one()
        return self.run_async(_fetch())
