"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    scraper_api_url: str = "https://gab-on-scraper-backend-latest.onrender.com/api/scrape"
    # 0 disables the client-side timeout
    scraper_timeout_seconds: float = 120.0
    default_max_pages: int = 5

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
