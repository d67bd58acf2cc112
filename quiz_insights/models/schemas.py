"""
Pydantic request/response models for the Quiz Insights backend.

Covers the difficulty tier table, single-score classification and tier
comparison, per-question difficulty analysis, and the per-quiz difficulty
breakdown. Field names are camelCase to match the JSON contract the quiz
front end already consumes.

Rates are percentages on a 0-100 scale carried as Decimal with two places.

All models use Pydantic v2 syntax.
"""

from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from quiz_insights.models.enums import DifficultyLevel, QuestionType


# =============================================================================
# Tier Models
# =============================================================================


class TierResponse(BaseModel):
    """One band of the difficulty scale, as exposed to display layers."""
    level: DifficultyLevel = Field(..., description="Tier identifier")
    rank: int = Field(..., description="Inclusive lower bound of the correct rate range")
    label: str = Field(..., description="Short human-readable name")
    description: str = Field(..., description="Explanatory text")
    isSentinel: bool = Field(
        default=False,
        description="True for the 'not enough data' tier, which is never ordered"
    )


class TierListResponse(BaseModel):
    """Full tier table, most lenient first with the sentinel last."""
    tiers: List[TierResponse] = Field(default_factory=list)


class ClassifyRequest(BaseModel):
    """Request to classify a single correct-answer-rate percentage."""
    model_config = ConfigDict(
        json_schema_extra={"example": {"score": 72.5}}
    )

    score: Optional[Decimal] = Field(
        default=None,
        description="Correct answer rate percentage; omit or null for no data"
    )


class CompareRequest(BaseModel):
    """Request to compare two difficulty tiers."""
    model_config = ConfigDict(
        json_schema_extra={"example": {"a": "HARD", "b": "EASY"}}
    )

    a: DifficultyLevel
    b: DifficultyLevel


class CompareResponse(BaseModel):
    """Result of comparing tier `a` against tier `b`."""
    a: DifficultyLevel
    b: DifficultyLevel
    comparable: bool = Field(..., description="False when either side is UNKNOWN")
    stricter: bool = Field(..., description="a is harder than b")
    lenienter: bool = Field(..., description="a is easier than b")


# =============================================================================
# Question Difficulty Analysis Models
# =============================================================================


class AnswerOptionStats(BaseModel):
    """Selection count for one answer option, as supplied by the statistics source."""
    answerId: Optional[UUID] = None
    content: Optional[str] = None
    isCorrect: Optional[bool] = None
    selectedCount: Optional[int] = Field(default=None, ge=0)


class QuestionDifficultyRequest(BaseModel):
    """
    Aggregated attempt statistics for a single question.

    Counts may be null; null is treated as zero.
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "questionId": "550e8400-e29b-41d4-a716-446655440000",
                "content": "What is the capital of France?",
                "questionType": "SINGLE_CHOICE",
                "totalAttempts": 120,
                "correctAttempts": 90,
                "incorrectAttempts": 24,
                "skippedAttempts": 6,
                "answerOptions": [
                    {"content": "Paris", "isCorrect": True, "selectedCount": 90},
                    {"content": "Lyon", "isCorrect": False, "selectedCount": 20},
                    {"content": "Nice", "isCorrect": False, "selectedCount": 4},
                ],
                "avgTimeSeconds": 14.6,
                "minTimeSeconds": 3,
                "maxTimeSeconds": 58,
            }
        }
    )

    questionId: UUID
    content: Optional[str] = None
    questionType: QuestionType = QuestionType.UNKNOWN

    totalAttempts: Optional[int] = Field(default=None, ge=0)
    correctAttempts: Optional[int] = Field(default=None, ge=0)
    incorrectAttempts: Optional[int] = Field(default=None, ge=0)
    skippedAttempts: Optional[int] = Field(default=None, ge=0)

    answerOptions: List[AnswerOptionStats] = Field(default_factory=list)

    avgTimeSeconds: Optional[float] = Field(default=None, ge=0)
    minTimeSeconds: Optional[int] = Field(default=None, ge=0)
    maxTimeSeconds: Optional[int] = Field(default=None, ge=0)
    avgTimeCorrectSeconds: Optional[float] = Field(default=None, ge=0)
    avgTimeIncorrectSeconds: Optional[float] = Field(default=None, ge=0)


class DifficultyMetrics(BaseModel):
    """Attempt counts, derived rates and the resulting difficulty tier."""
    totalAttempts: int = 0
    correctAttempts: int = 0
    incorrectAttempts: int = 0
    skippedAttempts: int = 0
    correctRate: Decimal = Decimal("0")
    incorrectRate: Decimal = Decimal("0")
    skippedRate: Decimal = Decimal("0")
    difficultyLevel: DifficultyLevel = DifficultyLevel.UNKNOWN
    difficultyScore: Optional[Decimal] = Field(
        default=None,
        description="100 - correctRate; null when there were no attempts"
    )


class AnswerDistribution(BaseModel):
    """How often one answer option was picked."""
    answerId: Optional[UUID] = None
    answerContent: str = ""
    isCorrect: Optional[bool] = None
    selectedCount: int = 0
    selectionRate: Decimal = Decimal("0")


class TimeAnalysis(BaseModel):
    """Response time statistics in whole seconds."""
    averageTimeSeconds: int = 0
    medianTimeSeconds: int = 0
    fastestTimeSeconds: int = 0
    slowestTimeSeconds: int = 0
    avgTimeCorrectAnswers: int = 0
    avgTimeIncorrectAnswers: int = 0


class QuestionDifficultyResponse(BaseModel):
    """Full difficulty analysis for one question."""
    questionId: UUID
    questionContent: str = ""
    questionType: QuestionType = QuestionType.UNKNOWN
    metrics: DifficultyMetrics
    answerDistribution: List[AnswerDistribution] = Field(default_factory=list)
    timeAnalysis: TimeAnalysis
    recommendations: List[str] = Field(default_factory=list)


# =============================================================================
# Quiz Difficulty Breakdown Models
# =============================================================================


class QuestionStatsRow(BaseModel):
    """Per-question answer totals for one quiz."""
    questionId: UUID
    content: Optional[str] = None
    questionType: QuestionType = QuestionType.UNKNOWN
    totalAnswers: Optional[int] = Field(default=None, ge=0)
    correctAnswers: Optional[int] = Field(default=None, ge=0)
    incorrectAnswers: Optional[int] = Field(default=None, ge=0)
    averageTimeSeconds: Optional[float] = Field(default=None, ge=0)


class QuestionPerformance(BaseModel):
    """Correct rate and difficulty tier for one question of a quiz."""
    questionId: UUID
    questionContent: str = ""
    questionType: QuestionType = QuestionType.UNKNOWN
    totalAnswers: int = 0
    correctAnswers: int = 0
    incorrectAnswers: int = 0
    correctRate: Decimal = Decimal("0")
    averageTimeSeconds: int = 0
    difficultyLevel: DifficultyLevel = DifficultyLevel.UNKNOWN


class DifficultyDistribution(BaseModel):
    """How a quiz's questions spread across the difficulty scale."""
    counts: Dict[DifficultyLevel, int] = Field(default_factory=dict)
    shares: Dict[DifficultyLevel, float] = Field(
        default_factory=dict,
        description="Share of classified (non-UNKNOWN) questions per level, 0-1"
    )
    totalQuestions: int = 0
    classifiedQuestions: int = 0
    unknownQuestions: int = 0
    hardestLevel: Optional[DifficultyLevel] = None
    easiestLevel: Optional[DifficultyLevel] = None
    meanCorrectRate: Optional[float] = Field(
        default=None,
        description="Mean correct rate over classified questions"
    )


class QuizBreakdownRequest(BaseModel):
    """Per-question totals for a quiz."""
    quizId: Optional[UUID] = None
    quizTitle: Optional[str] = None
    questions: List[QuestionStatsRow] = Field(default_factory=list)


class QuizBreakdownResponse(BaseModel):
    """Per-question difficulty plus the quiz-level distribution."""
    quizId: Optional[UUID] = None
    quizTitle: Optional[str] = None
    questionPerformance: List[QuestionPerformance] = Field(default_factory=list)
    distribution: DifficultyDistribution
