"""
Enumeration definitions for the Quiz Insights backend.

All enums inherit from both `str` and `Enum` so that they serialize cleanly
through Pydantic models and FastAPI responses.

The enums here are identifiers only. Thresholds, labels and descriptions for
the difficulty scale live in the tier table in
quiz_insights/services/tiering.py, keeping data separate from the rules that
iterate over it.
"""

from enum import Enum


class DifficultyLevel(str, Enum):
    """
    Difficulty tier identifiers for questions, derived from correct answer rate.

    Values (most lenient to strictest, then the sentinel):
    - VERY_EASY: correct rate >= 80
    - EASY: correct rate >= 60
    - MEDIUM: correct rate >= 40
    - HARD: correct rate >= 20
    - VERY_HARD: correct rate >= 0, and anything below the lowest threshold
    - UNKNOWN: no data; excluded from ordering comparisons
    """
    VERY_EASY = "VERY_EASY"
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"
    VERY_HARD = "VERY_HARD"
    UNKNOWN = "UNKNOWN"


class QuestionType(str, Enum):
    """
    Question formats reported alongside difficulty analysis.

    UNKNOWN is used when the statistics source does not supply a type.
    """
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    SINGLE_CHOICE = "SINGLE_CHOICE"
    TRUE_FALSE = "TRUE_FALSE"
    FILL_IN_THE_BLANKS = "FILL_IN_THE_BLANKS"
    SHORT_ANSWER = "SHORT_ANSWER"
    LONG_ANSWER = "LONG_ANSWER"
    UNKNOWN = "UNKNOWN"
