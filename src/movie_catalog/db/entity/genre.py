from sqlalchemy import Column, Text

from movie_catalog.db.entity.base import DBBaseModel


class Genre(DBBaseModel):
    __tablename__ = "genres"

    name = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Genre {self.id}: {self.name}>"
