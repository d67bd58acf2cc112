"""
Settings and environment management module for the Quiz Insights backend.

This module provides centralized configuration management using pydantic-settings,
which automatically loads settings from environment variables and .env files.

Key Features:
- Environment variable validation and type coercion
- Sensible defaults for development
- Singleton pattern via @lru_cache for efficient access

Environment Variables:
- APP_NAME: Display name used in the API root and OpenAPI docs
- APP_VERSION: Reported API version
- CORS_ORIGINS: JSON list of allowed browser origins
- LOG_LEVEL: Root logging level (default: INFO)

Difficulty Analysis Defaults:
- skip_rate_alert_threshold: 20 (Skip rate % above which a review note is added)
- distractor_selection_floor: 5 (Selection rate % below which a wrong option is "too obvious")
- content_preview_length: 100 (Max characters of question/answer text echoed back)

Usage:
    from quiz_insights.core.config import get_settings

    settings = get_settings()
    threshold = settings.skip_rate_alert_threshold
"""

from decimal import Decimal
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Name reported by the root endpoint and OpenAPI docs.
        app_version: Version reported by the root endpoint.
        cors_origins: Origins allowed by the CORS middleware.
        log_level: Logging level applied at startup.
        skip_rate_alert_threshold: Skip rate percentage that triggers a review recommendation.
        distractor_selection_floor: Selection rate percentage under which an
            incorrect option counts as an obvious distractor.
        content_preview_length: Maximum length of content strings in responses.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,
    )

    # =========================================================================
    # Application
    # =========================================================================

    app_name: str = 'Quiz Insights API'
    app_version: str = '1.0.0'

    # Front-end dev servers by default; override in production
    cors_origins: List[str] = [
        'http://localhost:3000',
        'http://127.0.0.1:3000',
    ]

    log_level: str = 'INFO'

    # =========================================================================
    # Difficulty Analysis
    # =========================================================================

    # Strictly greater than this skip rate adds a time-allocation recommendation
    skip_rate_alert_threshold: Decimal = Decimal('20')

    # Incorrect options picked by fewer than this share of attempts are flagged
    distractor_selection_floor: Decimal = Decimal('5')

    # Longer content is cut to (length - 3) characters plus "..."
    content_preview_length: int = 100


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Returns:
        Settings: The application settings instance with all configuration values.

    Raises:
        pydantic.ValidationError: If an environment variable has an invalid value.

    Note:
        To refresh settings in tests, clear the cache:
        >>> get_settings.cache_clear()
    """
    return Settings()
