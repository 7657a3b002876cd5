# forum/models/user.py

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from forum.database import Base


class UserModel(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    # at most one live session per user, never shared between users
    session_id = Column(String(36), unique=True, nullable=True)
    created_at = Column(DateTime, default=func.current_timestamp())

    def __repr__(self):
        return f"<UserModel(id={self.user_id}, username='{self.username}')>"
