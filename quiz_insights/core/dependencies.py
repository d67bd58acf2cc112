"""
FastAPI dependency injection module for the Quiz Insights backend.

Provides reusable dependencies so endpoint handlers receive configuration
through FastAPI rather than importing globals, which keeps them easy to call
directly from tests with an explicit Settings instance.

Usage:
    @router.post("/questions/analyze")
    async def analyze(request: QuestionDifficultyRequest, settings: SettingsDep):
        ...
"""

from typing import Annotated

from fastapi import Depends

from quiz_insights.core.config import Settings, get_settings


def get_settings_dependency() -> Settings:
    """
    Return the cached application settings.

    Wrapping get_settings lets tests override it through
    app.dependency_overrides without touching the lru_cache.
    """
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]


__all__ = [
    "get_settings_dependency",
    "SettingsDep",
]
