"""
Tier Classification Service

Maps a correct-answer-rate percentage onto the ordered question difficulty
scale and compares tiers with each other.

Classification rules:
- No score at all is "not enough data" and yields the UNKNOWN sentinel tier
- The score is truncated toward zero before comparison (59.9 -> 59, never rounded)
- Tiers are scanned most lenient first; the first tier whose rank is <= the
  truncated score wins, so each tier's lower bound is inclusive
- Scores below every threshold fall to the floor tier (VERY_HARD), never to
  the sentinel

Comparison rules:
- The sentinel takes part in no ordering; any comparison involving it is False
- A tier is stricter than another when its rank is lower

The tier table is built once at import and never mutated, so every function
here is safe to call from any thread or task.
"""

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal
from typing import Optional, Tuple, Union

from quiz_insights.models.enums import DifficultyLevel


logger = logging.getLogger(__name__)

Score = Union[int, float, Decimal]


@dataclass(frozen=True)
class Tier:
    """One band of the difficulty scale; rank is its inclusive lower bound."""
    level: DifficultyLevel
    rank: int
    label: str
    description: str

    @property
    def is_sentinel(self) -> bool:
        return self.level == DifficultyLevel.UNKNOWN


# =============================================================================
# Tier Table
# Ordered most lenient first. Ranks strictly decrease toward harder tiers and
# the 0 threshold guarantees every non-negative score has a home.
# =============================================================================

_ORDERED_TIERS: Tuple[Tier, ...] = (
    Tier(DifficultyLevel.VERY_EASY, 80, "Very Easy", "Most users answer correctly"),
    Tier(DifficultyLevel.EASY, 60, "Easy", "Majority of users answer correctly"),
    Tier(DifficultyLevel.MEDIUM, 40, "Medium", "Moderate difficulty"),
    Tier(DifficultyLevel.HARD, 20, "Hard", "Challenging for most users"),
    Tier(DifficultyLevel.VERY_HARD, 0, "Very Hard", "Most users struggle"),
)

SENTINEL_TIER = Tier(DifficultyLevel.UNKNOWN, -1, "Unknown", "Not enough data")

# Strictest non-sentinel tier; fallback for scores below every threshold
FLOOR_TIER = _ORDERED_TIERS[-1]

ALL_TIERS: Tuple[Tier, ...] = _ORDERED_TIERS + (SENTINEL_TIER,)

_TIERS_BY_LEVEL = {tier.level: tier for tier in ALL_TIERS}


def list_tiers() -> Tuple[Tier, ...]:
    """
    Return every defined tier, most lenient first with the sentinel last.

    The returned tuple is the module's own immutable table.
    """
    return ALL_TIERS


def get_tier(level: Union[DifficultyLevel, str]) -> Tier:
    """
    Look up the tier for a difficulty identifier.

    Args:
        level: DifficultyLevel member or its string value

    Returns:
        The matching Tier

    Raises:
        ValueError: If the string is not a known difficulty identifier
    """
    if not isinstance(level, DifficultyLevel):
        level = DifficultyLevel(level)
    return _TIERS_BY_LEVEL[level]


def _truncate(score: Score) -> Optional[Union[int, float, Decimal]]:
    """
    Truncate a score toward zero, returning None for NaN.

    Infinite values are passed through untouched since they compare correctly
    against integer ranks but cannot be converted to int.
    """
    if isinstance(score, Decimal):
        if score.is_nan():
            return None
        if score.is_infinite():
            return score
        # int() would expand huge exponents digit by digit
        return score.to_integral_value(rounding=ROUND_DOWN)
    elif isinstance(score, float):
        if math.isnan(score):
            return None
        if math.isinf(score):
            return score
    return int(score)


def classify(score: Optional[Score]) -> Tier:
    """
    Classify a correct answer rate percentage into a difficulty tier.

    Args:
        score: Percentage of correct answers, nominally 0-100. Values outside
            that range are accepted; None means no data.

    Returns:
        Exactly one Tier. UNKNOWN for None (or NaN), VERY_HARD for anything
        below the lowest threshold.
    """
    if score is None:
        return SENTINEL_TIER

    rate = _truncate(score)
    if rate is None:
        logger.debug("NaN score treated as missing data")
        return SENTINEL_TIER

    if rate < 0 or rate > 100:
        logger.debug(f"Score {score} outside 0-100, classifying anyway")

    for tier in _ORDERED_TIERS:
        if tier.rank <= rate:
            return tier

    return FLOOR_TIER


def is_stricter_than(a: Tier, b: Tier) -> bool:
    """
    True when tier `a` is harder than tier `b`.

    Always False if either side is the sentinel, including sentinel vs sentinel.
    """
    if a.is_sentinel or b.is_sentinel:
        return False
    return a.rank < b.rank


def is_lenienter_than(a: Tier, b: Tier) -> bool:
    """
    True when tier `a` is easier than tier `b`.

    Always False if either side is the sentinel, including sentinel vs sentinel.
    """
    if a.is_sentinel or b.is_sentinel:
        return False
    return a.rank > b.rank


def is_comparable(a: Tier, b: Tier) -> bool:
    """True when neither tier is the sentinel."""
    return not (a.is_sentinel or b.is_sentinel)


# =============================================================================
# Module Exports
# =============================================================================

__all__ = [
    "Tier",
    "SENTINEL_TIER",
    "FLOOR_TIER",
    "ALL_TIERS",
    "list_tiers",
    "get_tier",
    "classify",
    "is_stricter_than",
    "is_lenienter_than",
    "is_comparable",
]
