# forum/schemas/comment.py

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

class Comment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    comment_id: int = Field(description="Comment ID")
    user_id: int = Field(description="Author ID")
    movie_id: int = Field(description="Movie ID")
    content: str = Field(description="Comment body")
    created_at: Optional[datetime] = Field(default=None, description="Creation time")


class CommentCreate(BaseModel):
    movie_id: int = Field(description="Movie ID")
    content: str = Field(description="Comment body", min_length=1, max_length=1000)
