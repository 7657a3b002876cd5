# forum/services/comment_service.py

import logging
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from forum.core.errors import ConflictError, PersistenceError, ValidationError
from forum.core.session import SessionContext
from forum.models.comment import CommentModel
from forum.models.movie import MovieModel
from forum.schemas.comment import Comment, CommentCreate

logger = logging.getLogger(__name__)


class CommentService:

    def __init__(self, db: Session):
        self.db = db

    def create_comment(self, comment_data: CommentCreate, session: SessionContext) -> Comment:
        """Add a comment for the user behind a validated session.

        Guards run before the insert: the author id must be set, the movie
        must exist, and the same user may not post the same text twice on the
        same movie.
        """
        user_id = session.user_id
        if not user_id:
            raise ValidationError("Invalid user id")

        try:
            if not self._movie_exists(comment_data.movie_id):
                logger.warning("Comment rejected: movie_id=%s does not exist", comment_data.movie_id)
                raise ValidationError("Movie does not exist, can't add comment")

            if self._is_duplicate(user_id, comment_data.movie_id, comment_data.content):
                logger.warning(
                    "Comment rejected: duplicate from user_id=%s on movie_id=%s",
                    user_id,
                    comment_data.movie_id,
                )
                raise ConflictError("Comment already exists")

            comment_model = CommentModel(
                user_id=user_id,
                movie_id=comment_data.movie_id,
                content=comment_data.content,
            )
            self.db.add(comment_model)
            self.db.commit()
            self.db.refresh(comment_model)
        except IntegrityError as e:
            self.db.rollback()
            try:
                duplicate = self._is_duplicate(user_id, comment_data.movie_id, comment_data.content)
            except SQLAlchemyError as lookup_error:
                raise PersistenceError(
                    f"Failed to add comment: {lookup_error.__class__.__name__}"
                ) from lookup_error
            if duplicate:
                raise ConflictError("Comment already exists") from e
            # foreign key failure: the movie or user vanished after the checks
            raise ValidationError("Comment references a missing user or movie") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to add comment: {e.__class__.__name__}") from e

        logger.info(
            "Added comment_id=%s by user_id=%s on movie_id=%s",
            comment_model.comment_id,
            user_id,
            comment_model.movie_id,
        )
        return Comment.model_validate(comment_model)

    # helpers
    def _movie_exists(self, movie_id: int) -> bool:
        stmt = select(MovieModel.movie_id).where(MovieModel.movie_id == movie_id)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def _is_duplicate(self, user_id: int, movie_id: int, content: str) -> bool:
        stmt = select(CommentModel.comment_id).where(
            CommentModel.user_id == user_id,
            CommentModel.movie_id == movie_id,
            CommentModel.content == content,
        )
        return self.db.execute(stmt).first() is not None
