"""
Quiz Insights Services Module

Business logic for question difficulty. Every service is stateless and works
on data passed in by the caller; nothing here reads or writes storage.

Services:
- tiering: difficulty tier table, score classification and tier comparison
- difficulty: single-question difficulty analysis and recommendations
- breakdown: per-quiz question classification and difficulty distribution

All services are consumed by the API layer (quiz_insights/api/).
"""

# =============================================================================
# Tier Classification Exports
# Threshold-based bucketing of correct answer rate into ordered difficulty
# tiers, plus stricter/lenienter comparisons that exclude the UNKNOWN sentinel
# =============================================================================

from quiz_insights.services.tiering import (
    Tier,
    SENTINEL_TIER,
    FLOOR_TIER,
    ALL_TIERS,
    list_tiers,
    get_tier,
    classify,
    is_stricter_than,
    is_lenienter_than,
    is_comparable,
)

# =============================================================================
# Question Difficulty Analysis Exports
# Rates, difficulty score, answer distribution, time analysis and author
# recommendations for a single question
# =============================================================================

from quiz_insights.services.difficulty import (
    calculate_rate,
    truncate_content,
    build_difficulty_metrics,
    build_answer_distribution,
    build_time_analysis,
    build_recommendations,
    analyze_question_difficulty,
)

# =============================================================================
# Quiz Difficulty Breakdown Exports
# DataFrame-based classification of all questions in a quiz and the
# resulting difficulty distribution
# =============================================================================

from quiz_insights.services.breakdown import (
    questions_frame,
    classify_question_frame,
    summarize_difficulty_distribution,
    build_question_performance,
    build_quiz_breakdown,
)


__all__ = [
    # ----- Tier Classification -----
    'Tier',
    'SENTINEL_TIER',
    'FLOOR_TIER',
    'ALL_TIERS',
    'list_tiers',
    'get_tier',
    'classify',
    'is_stricter_than',
    'is_lenienter_than',
    'is_comparable',
    # ----- Question Difficulty Analysis -----
    'calculate_rate',
    'truncate_content',
    'build_difficulty_metrics',
    'build_answer_distribution',
    'build_time_analysis',
    'build_recommendations',
    'analyze_question_difficulty',
    # ----- Quiz Difficulty Breakdown -----
    'questions_frame',
    'classify_question_frame',
    'summarize_difficulty_distribution',
    'build_question_performance',
    'build_quiz_breakdown',
]
