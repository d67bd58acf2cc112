"""
Question Difficulty Analysis Service

Turns aggregated attempt statistics for a single question into a difficulty
report: correct/incorrect/skipped rates, the difficulty tier, how each answer
option was picked, response times, and review recommendations for the
question author.

Rate rules:
- Rates are percentages (0-100) with two decimals, rounded half up
- A missing or zero denominator yields a rate of 0

Tier rules:
- The tier comes from the correct rate via tiering.classify
- A question with no attempts is UNKNOWN, not VERY_HARD: a 0% rate computed
  from zero attempts is an absence of data, not a measurement

Recommendation rules:
- One fixed block of advice per tier
- Skip rate strictly above skip_rate_alert_threshold adds a timing note
- Any incorrect option picked by fewer than distractor_selection_floor percent
  of attempts adds an "obvious distractor" note

Everything here is a pure function of its arguments (plus Settings for the
two thresholds); nothing is fetched or stored.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Optional, Sequence

from quiz_insights.core.config import Settings, get_settings
from quiz_insights.models.enums import DifficultyLevel
from quiz_insights.models.schemas import (
    AnswerDistribution,
    AnswerOptionStats,
    DifficultyMetrics,
    QuestionDifficultyRequest,
    QuestionDifficultyResponse,
    TimeAnalysis,
)
from quiz_insights.services.tiering import classify


logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")
_TWO_PLACES = Decimal("0.01")


# =============================================================================
# Recommendation Text
# =============================================================================

LEVEL_RECOMMENDATIONS: Dict[DifficultyLevel, List[str]] = {
    DifficultyLevel.VERY_EASY: [
        "Consider making this question more challenging",
        "Add more similar correct-looking distractors",
    ],
    DifficultyLevel.EASY: [
        "This question has good balance but could be slightly harder",
    ],
    DifficultyLevel.MEDIUM: [
        "This question has optimal difficulty level",
    ],
    DifficultyLevel.HARD: [
        "Review if the question wording is clear",
        "Check if correct answer is unambiguous",
    ],
    DifficultyLevel.VERY_HARD: [
        "Consider revising this question - it may be too difficult",
        "Review if adequate learning materials cover this topic",
        "Check for potential issues with question clarity",
    ],
    DifficultyLevel.UNKNOWN: [
        "Unable to determine difficulty - not enough data",
    ],
}

HIGH_SKIP_RATE_RECOMMENDATION = (
    "High skip rate detected - review question difficulty and time allocation"
)
OBVIOUS_DISTRACTOR_RECOMMENDATION = (
    "Some distractors are too obvious - consider making them more plausible"
)


# =============================================================================
# Null-Safe Helpers
# =============================================================================

def _count(value: Optional[int]) -> int:
    return value if value is not None else 0


def _whole_seconds(value: Optional[float]) -> int:
    # Truncates like the rate classification does; 14.9s reports as 14s
    return int(value) if value is not None else 0


def calculate_rate(
    numerator: Optional[int],
    denominator: Optional[int]
) -> Decimal:
    """
    Percentage of numerator over denominator, two decimals, half-up rounding.

    Args:
        numerator: Count being measured (e.g. correct attempts)
        denominator: Total count (e.g. all attempts)

    Returns:
        Decimal percentage; Decimal("0") when either value is missing or the
        denominator is zero
    """
    if not denominator or numerator is None:
        return Decimal("0")
    rate = Decimal(numerator) * HUNDRED / Decimal(denominator)
    return rate.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def truncate_content(text: Optional[str], max_length: int) -> str:
    """
    Shorten text for display, marking the cut with "...".

    >>> truncate_content("abcdefghij", 8)
    'abcde...'
    """
    if text is None:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


# =============================================================================
# Report Builders
# =============================================================================

def build_difficulty_metrics(
    total_attempts: Optional[int],
    correct_attempts: Optional[int],
    incorrect_attempts: Optional[int],
    skipped_attempts: Optional[int]
) -> DifficultyMetrics:
    """
    Compute rates, difficulty tier and difficulty score from attempt counts.

    Args:
        total_attempts: All attempts on the question
        correct_attempts: Attempts answered correctly
        incorrect_attempts: Attempts answered incorrectly
        skipped_attempts: Attempts with no answer given

    Returns:
        DifficultyMetrics. difficultyScore is 100 - correctRate, or None when
        there were no attempts.
    """
    total = _count(total_attempts)
    correct = _count(correct_attempts)
    incorrect = _count(incorrect_attempts)
    skipped = _count(skipped_attempts)

    correct_rate = calculate_rate(correct, total)
    incorrect_rate = calculate_rate(incorrect, total)
    skipped_rate = calculate_rate(skipped, total)

    if total == 0:
        tier = classify(None)
        difficulty_score = None
    else:
        tier = classify(correct_rate)
        difficulty_score = HUNDRED - correct_rate

    return DifficultyMetrics(
        totalAttempts=total,
        correctAttempts=correct,
        incorrectAttempts=incorrect,
        skippedAttempts=skipped,
        correctRate=correct_rate,
        incorrectRate=incorrect_rate,
        skippedRate=skipped_rate,
        difficultyLevel=tier.level,
        difficultyScore=difficulty_score,
    )


def build_answer_distribution(
    options: Sequence[AnswerOptionStats],
    total_attempts: Optional[int],
    content_length: int = 100
) -> List[AnswerDistribution]:
    """
    Selection count and rate for each answer option, in input order.

    Args:
        options: Per-option selection counts
        total_attempts: Attempts on the question, used as the rate denominator
        content_length: Maximum characters of option text to echo back

    Returns:
        One AnswerDistribution per option
    """
    distribution: List[AnswerDistribution] = []
    for option in options:
        selected = _count(option.selectedCount)
        distribution.append(
            AnswerDistribution(
                answerId=option.answerId,
                answerContent=truncate_content(option.content, content_length),
                isCorrect=option.isCorrect,
                selectedCount=selected,
                selectionRate=calculate_rate(selected, total_attempts),
            )
        )
    return distribution


def build_time_analysis(
    avg_time: Optional[float],
    min_time: Optional[int],
    max_time: Optional[int],
    avg_time_correct: Optional[float] = None,
    avg_time_incorrect: Optional[float] = None
) -> TimeAnalysis:
    """
    Response time summary in whole seconds.

    Only aggregate times are available, so the median is reported as the
    average.
    """
    average = _whole_seconds(avg_time)
    return TimeAnalysis(
        averageTimeSeconds=average,
        medianTimeSeconds=average,
        fastestTimeSeconds=_count(min_time),
        slowestTimeSeconds=_count(max_time),
        avgTimeCorrectAnswers=_whole_seconds(avg_time_correct),
        avgTimeIncorrectAnswers=_whole_seconds(avg_time_incorrect),
    )


def has_obvious_distractors(
    distribution: Sequence[AnswerDistribution],
    selection_floor: Decimal
) -> bool:
    """True if any known-incorrect option was picked below selection_floor percent."""
    return any(
        answer.isCorrect is False and answer.selectionRate < selection_floor
        for answer in distribution
    )


def build_recommendations(
    metrics: DifficultyMetrics,
    distribution: Sequence[AnswerDistribution],
    settings: Optional[Settings] = None
) -> List[str]:
    """
    Review advice for the question author.

    Args:
        metrics: Computed difficulty metrics
        distribution: Per-option selection rates
        settings: Threshold source (defaults to get_settings())

    Returns:
        Recommendation strings: tier advice first, then skip-rate and
        distractor notes when they apply
    """
    if settings is None:
        settings = get_settings()

    recommendations = list(LEVEL_RECOMMENDATIONS[metrics.difficultyLevel])

    if metrics.skippedRate > settings.skip_rate_alert_threshold:
        recommendations.append(HIGH_SKIP_RATE_RECOMMENDATION)

    if has_obvious_distractors(distribution, settings.distractor_selection_floor):
        recommendations.append(OBVIOUS_DISTRACTOR_RECOMMENDATION)

    return recommendations


def analyze_question_difficulty(
    request: QuestionDifficultyRequest,
    settings: Optional[Settings] = None
) -> QuestionDifficultyResponse:
    """
    Build the full difficulty report for one question.

    Args:
        request: Aggregated attempt, option and timing statistics
        settings: Threshold and display settings (defaults to get_settings())

    Returns:
        QuestionDifficultyResponse with metrics, answer distribution, time
        analysis and recommendations
    """
    if settings is None:
        settings = get_settings()

    logger.info(f"Analyzing difficulty for question: {request.questionId}")

    metrics = build_difficulty_metrics(
        total_attempts=request.totalAttempts,
        correct_attempts=request.correctAttempts,
        incorrect_attempts=request.incorrectAttempts,
        skipped_attempts=request.skippedAttempts,
    )

    distribution = build_answer_distribution(
        request.answerOptions,
        metrics.totalAttempts,
        content_length=settings.content_preview_length,
    )

    time_analysis = build_time_analysis(
        avg_time=request.avgTimeSeconds,
        min_time=request.minTimeSeconds,
        max_time=request.maxTimeSeconds,
        avg_time_correct=request.avgTimeCorrectSeconds,
        avg_time_incorrect=request.avgTimeIncorrectSeconds,
    )

    recommendations = build_recommendations(metrics, distribution, settings)

    return QuestionDifficultyResponse(
        questionId=request.questionId,
        questionContent=request.content or "",
        questionType=request.questionType,
        metrics=metrics,
        answerDistribution=distribution,
        timeAnalysis=time_analysis,
        recommendations=recommendations,
    )


# =============================================================================
# Module Exports
# =============================================================================

__all__ = [
    "LEVEL_RECOMMENDATIONS",
    "HIGH_SKIP_RATE_RECOMMENDATION",
    "OBVIOUS_DISTRACTOR_RECOMMENDATION",
    "calculate_rate",
    "truncate_content",
    "build_difficulty_metrics",
    "build_answer_distribution",
    "build_time_analysis",
    "has_obvious_distractors",
    "build_recommendations",
    "analyze_question_difficulty",
]
