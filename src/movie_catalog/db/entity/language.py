from sqlalchemy import Column, Text

from movie_catalog.db.entity.base import DBBaseModel


class Language(DBBaseModel):
    __tablename__ = "languages"

    name = Column(Text, nullable=False)

    def __repr__(self):
        return f"<Language {self.id}: {self.name}>"
