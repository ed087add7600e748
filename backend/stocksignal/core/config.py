"""
Application Configuration

All settings loaded from environment variables.
Scoring rules are fixed in code and are not configurable here.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "StockSignal Engine"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    # Report / prompt formatting
    currency_symbol: str = "$"
    prompt_max_news_items: int = 5
    prompt_news_summary_chars: int = 200
    scenario_move_percent: float = 5.0  # Optimistic/pessimistic levels in prompts

    # Confidence tiers (0-100 scale)
    high_confidence_threshold: float = 80.0
    medium_confidence_threshold: float = 60.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
