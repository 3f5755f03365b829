from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Text, func
from sqlalchemy.orm import relationship

from movie_catalog.db.entity.base import DBBaseModel


class Movie(DBBaseModel):
    __tablename__ = "movies"

    title = Column(Text, nullable=False)
    genre_id = Column(Integer, ForeignKey("genres.id"), nullable=False)
    language_id = Column(Integer, ForeignKey("languages.id"), nullable=False)
    oscar_count = Column(Integer, nullable=False, default=0)
    release_date = Column(DateTime, nullable=True)

    # 关联对象随影片一起加载，异步会话中不能懒加载
    genre = relationship("Genre", lazy="selectin")
    language = relationship("Language", lazy="selectin")

    def __repr__(self):
        return f"<Movie {self.id}: {self.title}>"


# 标题不区分大小写唯一
Index("uq_movies_title_lower", func.lower(Movie.title), unique=True)
