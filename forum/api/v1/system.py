# forum/api/v1/system.py

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from forum.core.errors import QueryError
from forum.database import get_db

router = APIRouter()


@router.get("/health")
def health_check():
    """Liveness check"""
    return {"status": "healthy", "service": "forum"}


@router.get("/db-test")
def test_db(db: Session = Depends(get_db)):
    """Database connectivity check"""
    try:
        result = db.execute(text("SELECT 1")).scalar()
    except SQLAlchemyError as e:
        raise QueryError(f"Database unreachable: {e.__class__.__name__}") from e
    return {"status": "ok", "result": result}
