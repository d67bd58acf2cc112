"""
Package initialization file for Quiz Insights models.

Exports the enumerations from enums.py and the Pydantic schemas from
schemas.py so other modules can import them from quiz_insights.models
directly.

Usage:
    from quiz_insights.models import (
        DifficultyLevel,
        QuestionDifficultyRequest,
        QuestionDifficultyResponse,
    )
"""

# =============================================================================
# Enums
# =============================================================================

from quiz_insights.models.enums import (
    DifficultyLevel,
    QuestionType,
)


# =============================================================================
# Schemas
# =============================================================================

from quiz_insights.models.schemas import (
    # -------------------------------------------------------------------------
    # Tier Models
    # -------------------------------------------------------------------------
    TierResponse,
    TierListResponse,
    ClassifyRequest,
    CompareRequest,
    CompareResponse,

    # -------------------------------------------------------------------------
    # Question Difficulty Analysis Models
    # -------------------------------------------------------------------------
    AnswerOptionStats,
    QuestionDifficultyRequest,
    DifficultyMetrics,
    AnswerDistribution,
    TimeAnalysis,
    QuestionDifficultyResponse,

    # -------------------------------------------------------------------------
    # Quiz Difficulty Breakdown Models
    # -------------------------------------------------------------------------
    QuestionStatsRow,
    QuestionPerformance,
    DifficultyDistribution,
    QuizBreakdownRequest,
    QuizBreakdownResponse,
)


__all__ = [
    # Enums
    "DifficultyLevel",
    "QuestionType",

    # Tier Models
    "TierResponse",
    "TierListResponse",
    "ClassifyRequest",
    "CompareRequest",
    "CompareResponse",

    # Question Difficulty Analysis Models
    "AnswerOptionStats",
    "QuestionDifficultyRequest",
    "DifficultyMetrics",
    "AnswerDistribution",
    "TimeAnalysis",
    "QuestionDifficultyResponse",

    # Quiz Difficulty Breakdown Models
    "QuestionStatsRow",
    "QuestionPerformance",
    "DifficultyDistribution",
    "QuizBreakdownRequest",
    "QuizBreakdownResponse",
]
