# 基础异步Repository抽象类
from abc import ABC
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

M = TypeVar("M")  # 模型类型
K = TypeVar("K")  # 主键类型


class BaseRepositoryAsync(Generic[M, K], ABC):
    def __init__(self, db: AsyncSession):
        self.db = db
        self.model = self._resolve_model_type()

    def _resolve_model_type(self) -> Type[M]:
        """通过泛型参数解析模型类型"""
        origin = getattr(self.__class__, "__orig_bases__", [])
        if origin and hasattr(origin[0], "__args__"):
            return origin[0].__args__[0]
        raise TypeError("无法自动解析模型类型，请显式指定")

    async def get_by_id(self, id: K) -> Optional[M]:
        result = await self.db.execute(select(self.model).where(self.model.id == id))
        return result.scalars().first()

    async def create_async(self, instance: M) -> M:
        """异步创建"""
        self.db.add(instance)
        await self.db.commit()
        await self.db.refresh(instance)
        return instance

    async def update_async(self, instance: M, update_data: Dict[str, Any]) -> M:
        """只覆盖 update_data 中出现的字段"""
        for key, value in update_data.items():
            setattr(instance, key, value)
        await self.db.commit()
        await self.db.refresh(instance)
        return instance

    async def delete_async(self, instance: M) -> None:
        await self.db.delete(instance)
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()
