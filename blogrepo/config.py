from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_PACKAGE_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PACKAGE_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Blog Content Repository"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./blog.db"
    cors_origins: list[str] = ["http://localhost:3020"]

    # Article cache — 0 means unbounded, >0 enables LRU eviction
    article_cache_capacity: int = 0

    # Random sampling pivot offset added to uniform [0, 1)
    random_sampling_offset: float = 0.1

    default_page_size: int = 20

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_cache: str = "INFO"            # ArticleCache put/evict traces
    log_level_repository: str = "INFO"       # repositories, random sampling pivots

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
