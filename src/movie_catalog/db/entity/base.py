from sqlalchemy import Column, Integer, DateTime, func
from sqlalchemy.orm import declared_attr

from movie_catalog.config.database import Base


class DBBaseModel(Base):
    """所有模型的基类"""
    __abstract__ = True

    @declared_attr
    def __tablename__(cls):
        return cls.__name__.lower() + 's'

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp())
