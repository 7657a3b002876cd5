# forum/models/movie.py

from sqlalchemy import Column, Integer, String, Text
from forum.database import Base


class MovieModel(Base):
    __tablename__ = "movies"

    movie_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    release_date = Column(String(32), nullable=True)
    image_url = Column(Text, nullable=True)

    def __repr__(self):
        return f"<MovieModel(movie_id={self.movie_id}, title='{self.title}')>"
