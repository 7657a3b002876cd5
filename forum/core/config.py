# forum/core/config.py

import logging
from functools import lru_cache
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEED_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = Field(default="Movie Forum", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # Database
    database_url: str = Field(default="sqlite:///./forum.db", description="SQLAlchemy database URL")
    sql_echo: bool = Field(default=False, description="Echo SQL statements")

    # User cookie signing
    secret_key: str = Field(default="forum-cookie-secret", description="User cookie signing key")
    algorithm: str = Field(default="HS256", description="User cookie signing algorithm")

    # Session cookies
    session_cookie_name: str = Field(default="forum_session", description="Session token cookie")
    user_cookie_name: str = Field(default="forum_user", description="Cached user cookie")
    session_expire_minutes: int = Field(default=30, description="Cookie lifetime in minutes")
    cookie_secure: bool = Field(default=False, description="Send cookies over HTTPS only")

    # Seed data
    seed_dir: Path = Field(default=DEFAULT_SEED_DIR, description="Directory holding seed JSON files")
    seed_on_startup: bool = Field(default=True, description="Load seed files at startup")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
