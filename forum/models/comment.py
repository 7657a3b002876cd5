# forum/models/comment.py

from sqlalchemy import (
    Column,
    Integer,
    Text,
    DateTime,
    ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.sql import func
from forum.database import Base


class CommentModel(Base):
    __tablename__ = "comments"
    __table_args__ = (
        UniqueConstraint("user_id", "movie_id", "content", name="uq_comments_user_movie_content"),
    )

    comment_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    movie_id = Column(Integer, ForeignKey("movies.movie_id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=func.current_timestamp())

    def __repr__(self):
        return (
            f"<CommentModel(id={self.comment_id}, user_id={self.user_id}, movie_id={self.movie_id})>"
        )
