# forum/database.py

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from forum.core.config import get_settings


def create_db_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    """Build an engine; SQLite connections get foreign key enforcement"""
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        # requests are served from a threadpool
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)  # drop stale pooled connections
        kwargs.setdefault("pool_recycle", 300)

    db_engine = create_engine(database_url, echo=echo, **kwargs)

    if is_sqlite:
        @event.listens_for(db_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


settings = get_settings()

# Engine
engine = create_db_engine(settings.database_url, echo=settings.sql_echo)

# Session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Declarative base
Base = declarative_base()


# Request-scoped session dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
