#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
初始化数据库：创建所有表，并在查找表为空时写入默认的类型和语言

用法:
    python -m movie_catalog.scripts.init_db
"""

import asyncio
import logging
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from movie_catalog.common.utils.logging_config import setup_logging
from movie_catalog.config.database import Base, build_engine, build_session_factory
from movie_catalog.config.settings import settings
# 导入所有实体类，确保它们被注册到SQLAlchemy的元数据中
from movie_catalog.db.entity import Genre, Language, Movie  # noqa: F401

logger = logging.getLogger(__name__)

DEFAULT_GENRES = (
    "Action",
    "Animation",
    "Comedy",
    "Documentary",
    "Drama",
    "Fantasy",
    "Horror",
    "Romance",
    "Science Fiction",
    "Thriller",
)

DEFAULT_LANGUAGES = (
    "English",
    "French",
    "German",
    "Italian",
    "Japanese",
    "Korean",
    "Mandarin",
    "Portuguese",
    "Spanish",
)


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("数据库表创建成功")


async def seed_lookup(session: AsyncSession, model, names: Sequence[str]) -> int:
    """表为空时写入默认名称，返回写入的行数"""
    existing = (await session.execute(select(func.count()).select_from(model))).scalar()
    if existing:
        logger.info(f"{model.__tablename__} 已有 {existing} 条记录，跳过初始化")
        return 0

    session.add_all([model(name=name) for name in names])
    await session.commit()
    logger.info(f"{model.__tablename__} 写入 {len(names)} 条默认记录")
    return len(names)


async def init_db(engine: AsyncEngine) -> None:
    """初始化数据库，创建所有表并写入查找数据"""
    await create_tables(engine)

    session_factory = build_session_factory(engine)
    async with session_factory() as session:
        await seed_lookup(session, Genre, DEFAULT_GENRES)
        await seed_lookup(session, Language, DEFAULT_LANGUAGES)


async def main() -> None:
    engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    try:
        await init_db(engine)
    except Exception as e:
        logger.error(f"初始化数据库时出错: {str(e)}")
        raise
    finally:
        await engine.dispose()


if __name__ == "__main__":
    setup_logging(log_level=settings.LOG_LEVEL)
    asyncio.run(main())
