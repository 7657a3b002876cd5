# forum/models/genre.py

from sqlalchemy import Column, Integer, String
from forum.database import Base


class GenreModel(Base):
    __tablename__ = "genres"

    genre_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)

    def __repr__(self):
        return f"<GenreModel(id={self.genre_id}, name='{self.name}')>"
