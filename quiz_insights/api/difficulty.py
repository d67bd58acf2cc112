"""
FastAPI router module for question difficulty.

Implements:
- GET /difficulty/levels: ordered tier table for display
- GET /difficulty/levels/{level}: a single tier
- POST /difficulty/classify: classify one correct-answer-rate percentage
- POST /difficulty/compare: compare two tiers
- POST /difficulty/questions/analyze: full analysis for one question
- POST /difficulty/quizzes/breakdown: per-question tiers and distribution for a quiz

Callers supply aggregated counts; this router never touches storage.
"""

import logging

from fastapi import APIRouter, HTTPException

from quiz_insights.core.dependencies import SettingsDep
from quiz_insights.models.schemas import (
    ClassifyRequest,
    CompareRequest,
    CompareResponse,
    QuestionDifficultyRequest,
    QuestionDifficultyResponse,
    QuizBreakdownRequest,
    QuizBreakdownResponse,
    TierListResponse,
    TierResponse,
)
from quiz_insights.services.breakdown import build_quiz_breakdown
from quiz_insights.services.difficulty import analyze_question_difficulty
from quiz_insights.services.tiering import (
    Tier,
    classify,
    get_tier,
    is_comparable,
    is_lenienter_than,
    is_stricter_than,
    list_tiers,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/difficulty", tags=["difficulty"])


def _tier_response(tier: Tier) -> TierResponse:
    return TierResponse(
        level=tier.level,
        rank=tier.rank,
        label=tier.label,
        description=tier.description,
        isSentinel=tier.is_sentinel,
    )


@router.get("/levels", response_model=TierListResponse)
async def get_levels() -> TierListResponse:
    """
    List every difficulty tier, most lenient first with UNKNOWN last.
    """
    return TierListResponse(tiers=[_tier_response(tier) for tier in list_tiers()])


@router.get("/levels/{level}", response_model=TierResponse)
async def get_level(level: str) -> TierResponse:
    """
    Get a single tier by identifier (e.g. "HARD").

    Raises:
        HTTPException 404: If the identifier is not a difficulty level
    """
    try:
        tier = get_tier(level.upper())
    except ValueError:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown difficulty level: {level}"
        )
    return _tier_response(tier)


@router.post("/classify", response_model=TierResponse)
async def classify_score(request: ClassifyRequest) -> TierResponse:
    """
    Classify a correct answer rate percentage.

    A null score returns the UNKNOWN tier; scores below 0 return VERY_HARD.
    """
    return _tier_response(classify(request.score))


@router.post("/compare", response_model=CompareResponse)
async def compare_levels(request: CompareRequest) -> CompareResponse:
    """
    Compare tier `a` against tier `b`.

    Comparisons involving UNKNOWN are never true.
    """
    a = get_tier(request.a)
    b = get_tier(request.b)
    return CompareResponse(
        a=a.level,
        b=b.level,
        comparable=is_comparable(a, b),
        stricter=is_stricter_than(a, b),
        lenienter=is_lenienter_than(a, b),
    )


@router.post("/questions/analyze", response_model=QuestionDifficultyResponse)
async def analyze_question(
    request: QuestionDifficultyRequest,
    settings: SettingsDep
) -> QuestionDifficultyResponse:
    """
    Difficulty metrics, answer distribution, timing and recommendations for
    one question.
    """
    return analyze_question_difficulty(request, settings)


@router.post("/quizzes/breakdown", response_model=QuizBreakdownResponse)
async def quiz_breakdown(
    request: QuizBreakdownRequest,
    settings: SettingsDep
) -> QuizBreakdownResponse:
    """
    Difficulty tier for every question of a quiz plus the quiz-level
    distribution.
    """
    return build_quiz_breakdown(request, settings)
