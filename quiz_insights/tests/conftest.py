"""
Pytest Configuration and Shared Fixtures for Quiz Insights Tests.

Provides:
- Custom markers for test organization
- A Settings instance with default thresholds, independent of any .env file
- Sample question statistics for difficulty analysis and quiz breakdown tests

Dependencies:
- pytest
- pytest-asyncio (async endpoint handlers are awaited directly)
- pandas
"""

from typing import Generator, List
from unittest.mock import patch
from uuid import UUID, uuid4

import pandas as pd
import pytest

from quiz_insights.core.config import Settings
from quiz_insights.models.schemas import (
    AnswerOptionStats,
    QuestionDifficultyRequest,
    QuestionStatsRow,
)


# ============================================================
# PYTEST HOOKS
# ============================================================

def pytest_configure(config) -> None:
    """
    Register custom markers.

    - parity: checks that reproduce the quiz platform's existing difficulty numbers
    """
    config.addinivalue_line(
        'markers',
        'parity: marks tests reproducing existing quiz platform difficulty results'
    )


# ============================================================
# SETTINGS FIXTURES
# ============================================================

@pytest.fixture
def settings() -> Settings:
    """
    Settings with default difficulty thresholds.

    _env_file=None keeps a developer's local .env out of the tests.
    """
    return Settings(_env_file=None)


@pytest.fixture
def patched_settings(settings: Settings) -> Generator[Settings, None, None]:
    """
    Patch get_settings in the service modules so default-argument code paths
    use the fixture settings.
    """
    with patch('quiz_insights.services.difficulty.get_settings', return_value=settings), \
            patch('quiz_insights.services.breakdown.get_settings', return_value=settings):
        yield settings


# ============================================================
# SAMPLE DATA FIXTURES
# ============================================================

@pytest.fixture
def question_id() -> UUID:
    return UUID('550e8400-e29b-41d4-a716-446655440000')


@pytest.fixture
def balanced_question(question_id: UUID) -> QuestionDifficultyRequest:
    """
    A MEDIUM question: 50 of 100 correct, 10 skipped, plausible distractors.
    """
    return QuestionDifficultyRequest(
        questionId=question_id,
        content='Which data structure gives O(1) average lookup by key?',
        questionType='SINGLE_CHOICE',
        totalAttempts=100,
        correctAttempts=50,
        incorrectAttempts=40,
        skippedAttempts=10,
        answerOptions=[
            AnswerOptionStats(answerId=uuid4(), content='Hash map', isCorrect=True, selectedCount=50),
            AnswerOptionStats(answerId=uuid4(), content='Binary search tree', isCorrect=False, selectedCount=25),
            AnswerOptionStats(answerId=uuid4(), content='Sorted array', isCorrect=False, selectedCount=15),
        ],
        avgTimeSeconds=21.7,
        minTimeSeconds=4,
        maxTimeSeconds=75,
        avgTimeCorrectSeconds=18.2,
        avgTimeIncorrectSeconds=26.9,
    )


@pytest.fixture
def quiz_question_rows() -> List[QuestionStatsRow]:
    """
    Five questions covering EASY, MEDIUM, HARD, VERY_EASY and an unanswered one.
    """
    return [
        QuestionStatsRow(questionId=uuid4(), content='Q1', questionType='TRUE_FALSE',
                         totalAnswers=40, correctAnswers=26, incorrectAnswers=14,
                         averageTimeSeconds=9.4),
        QuestionStatsRow(questionId=uuid4(), content='Q2', questionType='SINGLE_CHOICE',
                         totalAnswers=40, correctAnswers=18, incorrectAnswers=22,
                         averageTimeSeconds=15.0),
        QuestionStatsRow(questionId=uuid4(), content='Q3', questionType='MULTIPLE_CHOICE',
                         totalAnswers=40, correctAnswers=10, incorrectAnswers=30,
                         averageTimeSeconds=31.8),
        QuestionStatsRow(questionId=uuid4(), content='Q4', questionType='SINGLE_CHOICE',
                         totalAnswers=40, correctAnswers=38, incorrectAnswers=2,
                         averageTimeSeconds=6.1),
        QuestionStatsRow(questionId=uuid4(), content='Q5', questionType='LONG_ANSWER',
                         totalAnswers=0, correctAnswers=0, incorrectAnswers=0),
    ]


@pytest.fixture
def question_stats_frame() -> pd.DataFrame:
    """Raw statistics export as a DataFrame, including missing counts."""
    return pd.DataFrame({
        'question_id': ['a', 'b', 'c', 'd'],
        'total_answers': [10, 3, None, 200],
        'correct_answers': [8, 1, None, 0],
    })
