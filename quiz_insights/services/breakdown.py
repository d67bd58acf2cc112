"""
Quiz Difficulty Breakdown Service

Classifies every question of a quiz by correct answer rate and summarizes how
the quiz spreads across the difficulty scale.

Per-question rules (same as the single-question analysis):
- correct_rate = correct_answers * 100 / total_answers, two decimals, half up
- Questions with no answers are UNKNOWN rather than VERY_HARD

Distribution rules:
- Every difficulty level appears in the counts, zeros included
- Shares, hardest/easiest level and mean correct rate are computed over
  classified questions only; UNKNOWN questions are counted separately
- Hardest/easiest are picked by row position, so any index (repeated
  labels included) is accepted

Works on pandas DataFrames so callers holding a statistics export can classify
it in one call.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from quiz_insights.core.config import Settings, get_settings
from quiz_insights.models.enums import DifficultyLevel, QuestionType
from quiz_insights.models.schemas import (
    DifficultyDistribution,
    QuestionPerformance,
    QuestionStatsRow,
    QuizBreakdownRequest,
    QuizBreakdownResponse,
)
from quiz_insights.services.difficulty import calculate_rate, truncate_content
from quiz_insights.services.tiering import classify


logger = logging.getLogger(__name__)


# =============================================================================
# Frame Layout
# =============================================================================

QUESTION_FRAME_COLUMNS: List[str] = [
    "question_id",
    "content",
    "question_type",
    "total_answers",
    "correct_answers",
    "incorrect_answers",
    "average_time_seconds",
]

REQUIRED_COLUMNS: List[str] = ["total_answers", "correct_answers"]


def _as_count(series: pd.Series) -> pd.Series:
    return pd.to_numeric(series, errors="coerce").fillna(0).astype(int)


def questions_frame(rows: Sequence[QuestionStatsRow]) -> pd.DataFrame:
    """
    Convert per-question stats rows into a DataFrame with QUESTION_FRAME_COLUMNS.

    An empty input yields an empty frame that still carries every column.
    """
    records = [
        {
            "question_id": row.questionId,
            "content": row.content,
            "question_type": row.questionType.value,
            "total_answers": row.totalAnswers,
            "correct_answers": row.correctAnswers,
            "incorrect_answers": row.incorrectAnswers,
            "average_time_seconds": row.averageTimeSeconds,
        }
        for row in rows
    ]
    return pd.DataFrame(records, columns=QUESTION_FRAME_COLUMNS)


def classify_question_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Add correct_rate, difficulty_level and difficulty_rank columns.

    Args:
        df: Frame with at least total_answers and correct_answers columns.
            Missing counts are treated as zero.

    Returns:
        A new DataFrame; the input is not modified. difficulty_level holds the
        DifficultyLevel string values.

    Raises:
        ValueError: If a required column is missing
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    out = df.copy()
    total = _as_count(out["total_answers"])
    correct = _as_count(out["correct_answers"])

    rates = [calculate_rate(c, t) for c, t in zip(correct.tolist(), total.tolist())]
    tiers = [
        classify(rate) if t > 0 else classify(None)
        for rate, t in zip(rates, total.tolist())
    ]

    out["total_answers"] = total
    out["correct_answers"] = correct
    out["correct_rate"] = [float(rate) for rate in rates]
    out["difficulty_level"] = [tier.level.value for tier in tiers]
    out["difficulty_rank"] = [tier.rank for tier in tiers]

    return out


def summarize_difficulty_distribution(df: pd.DataFrame) -> DifficultyDistribution:
    """
    Summarize a classified question frame.

    Args:
        df: Output of classify_question_frame

    Returns:
        DifficultyDistribution with per-level counts and shares
    """
    levels = df["difficulty_level"]
    counts = {level: int((levels == level.value).sum()) for level in DifficultyLevel}

    classified = df[levels != DifficultyLevel.UNKNOWN.value]
    n_classified = len(classified)

    shares = {
        level: (counts[level] / n_classified if n_classified else 0.0)
        for level in DifficultyLevel
        if level != DifficultyLevel.UNKNOWN
    }

    hardest: Optional[DifficultyLevel] = None
    easiest: Optional[DifficultyLevel] = None
    mean_rate: Optional[float] = None
    if n_classified:
        ranks = classified["difficulty_rank"].to_numpy()
        level_values = classified["difficulty_level"]
        hardest = DifficultyLevel(level_values.iloc[int(ranks.argmin())])
        easiest = DifficultyLevel(level_values.iloc[int(ranks.argmax())])
        mean_rate = round(float(np.mean(classified["correct_rate"].to_numpy())), 2)

    return DifficultyDistribution(
        counts=counts,
        shares=shares,
        totalQuestions=len(df),
        classifiedQuestions=n_classified,
        unknownQuestions=counts[DifficultyLevel.UNKNOWN],
        hardestLevel=hardest,
        easiestLevel=easiest,
        meanCorrectRate=mean_rate,
    )


def build_question_performance(
    df: pd.DataFrame,
    settings: Optional[Settings] = None
) -> List[QuestionPerformance]:
    """
    Convert a classified question frame into QuestionPerformance records.

    Args:
        df: Output of classify_question_frame built from questions_frame
        settings: Display settings (defaults to get_settings())

    Returns:
        One QuestionPerformance per row, in frame order
    """
    if settings is None:
        settings = get_settings()

    performance: List[QuestionPerformance] = []
    for row in df.itertuples(index=False):
        content = row.content if isinstance(row.content, str) else None
        avg_time = row.average_time_seconds
        incorrect = row.incorrect_answers
        performance.append(
            QuestionPerformance(
                questionId=row.question_id,
                questionContent=truncate_content(content, settings.content_preview_length),
                questionType=QuestionType(row.question_type),
                totalAnswers=int(row.total_answers),
                correctAnswers=int(row.correct_answers),
                incorrectAnswers=0 if pd.isna(incorrect) else int(incorrect),
                correctRate=calculate_rate(int(row.correct_answers), int(row.total_answers)),
                averageTimeSeconds=0 if pd.isna(avg_time) else int(avg_time),
                difficultyLevel=DifficultyLevel(row.difficulty_level),
            )
        )
    return performance


def build_quiz_breakdown(
    request: QuizBreakdownRequest,
    settings: Optional[Settings] = None
) -> QuizBreakdownResponse:
    """
    Classify every question of a quiz and summarize the distribution.

    Args:
        request: Per-question answer totals
        settings: Display settings (defaults to get_settings())

    Returns:
        QuizBreakdownResponse with per-question performance and distribution
    """
    logger.info(
        f"Building difficulty breakdown for quiz {request.quizId} "
        f"({len(request.questions)} questions)"
    )

    classified = classify_question_frame(questions_frame(request.questions))

    return QuizBreakdownResponse(
        quizId=request.quizId,
        quizTitle=request.quizTitle,
        questionPerformance=build_question_performance(classified, settings),
        distribution=summarize_difficulty_distribution(classified),
    )


# =============================================================================
# Module Exports
# =============================================================================

__all__ = [
    "QUESTION_FRAME_COLUMNS",
    "REQUIRED_COLUMNS",
    "questions_frame",
    "classify_question_frame",
    "summarize_difficulty_distribution",
    "build_question_performance",
    "build_quiz_breakdown",
]
