# forum/api/v1/comments.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from forum.core.dependencies import get_session_context
from forum.core.session import SessionContext
from forum.database import get_db
from forum.schemas.comment import Comment, CommentCreate
from forum.services.comment_service import CommentService

router = APIRouter()

def get_comment_service(db: Session = Depends(get_db)) -> CommentService:
    return CommentService(db)

@router.post(
    "/",
    response_model=Comment,
    status_code=status.HTTP_201_CREATED,
    summary="Post comment",
    description="Adds a comment to a movie. Requires a valid session cookie."
)
def create_comment(
    comment_data: CommentCreate,
    session: SessionContext = Depends(get_session_context),
    comment_service: CommentService = Depends(get_comment_service)
):
    return comment_service.create_comment(comment_data, session)
