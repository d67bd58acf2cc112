"""
API package initialization.

This package contains FastAPI router modules for Quiz Insights:
- difficulty: difficulty tiers, classification, question analysis and quiz breakdown
"""

from fastapi import APIRouter

from quiz_insights.api.difficulty import router as difficulty_router

# Create main API router
api_router = APIRouter()

# difficulty router carries its own /difficulty prefix
api_router.include_router(difficulty_router)

__all__ = [
    "api_router",
    "difficulty_router",
]
