from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from movie_catalog.config.settings import settings


def _connect_args(database_url: str) -> Dict[str, Any]:
    # server_settings is only understood by asyncpg
    if database_url.startswith("postgresql+asyncpg"):
        return {"server_settings": {"search_path": "public"}}
    return {}


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """根据连接串创建异步引擎"""
    return create_async_engine(
        database_url,
        echo=echo,
        future=True,
        connect_args=_connect_args(database_url),
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind, expire_on_commit=False)


# Use the DATABASE_URL from settings
engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

async_session = build_session_factory(engine)

Base = declarative_base()
