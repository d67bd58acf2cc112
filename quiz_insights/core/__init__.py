"""
Core infrastructure package for the Quiz Insights backend.

Provides:
- Configuration management via pydantic-settings
- FastAPI dependency injection utilities

Re-exports key components so callers can write:

    from quiz_insights.core import get_settings, SettingsDep
"""

from quiz_insights.core.config import Settings, get_settings
from quiz_insights.core.dependencies import get_settings_dependency, SettingsDep

__all__ = [
    # Configuration management (from config.py)
    'Settings',
    'get_settings',
    # FastAPI dependency injection (from dependencies.py)
    'get_settings_dependency',
    'SettingsDep',
]
