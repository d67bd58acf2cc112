"""
Tier Classification Test Module

Tests for quiz_insights/services/tiering.py.

Test Coverage:
- Inclusive lower bound of every tier
- Truncation toward zero (59.9 -> EASY boundary is not reached)
- Missing data (None, NaN) vs below-floor scores (negative) stay distinct
- Out-of-range and non-finite scores
- Stricter/lenienter comparisons and the UNKNOWN sentinel exclusion
- Static tier table shape and ordering
"""

import math
import time
from decimal import Decimal

import pytest

from quiz_insights.models.enums import DifficultyLevel
from quiz_insights.services.tiering import (
    ALL_TIERS,
    FLOOR_TIER,
    SENTINEL_TIER,
    Tier,
    classify,
    get_tier,
    is_comparable,
    is_lenienter_than,
    is_stricter_than,
    list_tiers,
)


VERY_EASY = get_tier(DifficultyLevel.VERY_EASY)
EASY = get_tier(DifficultyLevel.EASY)
MEDIUM = get_tier(DifficultyLevel.MEDIUM)
HARD = get_tier(DifficultyLevel.HARD)
VERY_HARD = get_tier(DifficultyLevel.VERY_HARD)
UNKNOWN = get_tier(DifficultyLevel.UNKNOWN)

ORDERED = [tier for tier in ALL_TIERS if not tier.is_sentinel]


# =============================================================================
# Test Class: TestTierTable
# =============================================================================

class TestTierTable:
    """Static tier definitions."""

    def test_thresholds(self):
        assert [t.rank for t in ORDERED] == [80, 60, 40, 20, 0]

    def test_list_tiers_most_lenient_first_sentinel_last(self):
        tiers = list_tiers()
        assert tiers[0] is VERY_EASY
        assert tiers[-1] is SENTINEL_TIER
        assert len(tiers) == 6

    def test_exactly_one_sentinel(self):
        sentinels = [t for t in list_tiers() if t.is_sentinel]
        assert sentinels == [UNKNOWN]

    def test_ranks_strictly_decreasing(self):
        ranks = [t.rank for t in ORDERED]
        assert all(a > b for a, b in zip(ranks, ranks[1:]))

    def test_floor_tier_is_strictest(self):
        assert FLOOR_TIER is VERY_HARD
        assert FLOOR_TIER.rank == min(t.rank for t in ORDERED)

    def test_tiers_are_immutable(self):
        with pytest.raises(AttributeError):
            VERY_EASY.rank = 90  # type: ignore[misc]
        assert isinstance(list_tiers(), tuple)

    def test_labels_and_descriptions(self):
        assert EASY.label == "Easy"
        assert EASY.description == "Majority of users answer correctly"
        assert UNKNOWN.label == "Unknown"
        assert UNKNOWN.description == "Not enough data"

    def test_every_level_has_a_tier(self):
        assert {t.level for t in list_tiers()} == set(DifficultyLevel)


class TestGetTier:
    """Identifier lookup."""

    def test_accepts_enum(self):
        assert get_tier(DifficultyLevel.HARD) is HARD

    def test_accepts_string_value(self):
        assert get_tier("MEDIUM") is MEDIUM

    def test_unknown_identifier_raises(self):
        with pytest.raises(ValueError):
            get_tier("IMPOSSIBLE")


# =============================================================================
# Test Class: TestClassify
# =============================================================================

class TestClassify:
    """classify(score) scenarios."""

    @pytest.mark.parametrize("score,expected", [
        (85, DifficultyLevel.VERY_EASY),
        (80, DifficultyLevel.VERY_EASY),
        (79.9, DifficultyLevel.EASY),
        (79.999, DifficultyLevel.EASY),
        (60, DifficultyLevel.EASY),
        (59.9, DifficultyLevel.MEDIUM),
        (40, DifficultyLevel.MEDIUM),
        (39.99, DifficultyLevel.HARD),
        (20, DifficultyLevel.HARD),
        (19.5, DifficultyLevel.VERY_HARD),
        (0, DifficultyLevel.VERY_HARD),
        (100, DifficultyLevel.VERY_EASY),
    ])
    def test_scenarios(self, score, expected):
        assert classify(score).level == expected

    @pytest.mark.parametrize("tier", ORDERED)
    def test_lower_bound_inclusive(self, tier: Tier):
        assert classify(tier.rank) is tier

    def test_none_is_sentinel(self):
        assert classify(None) is SENTINEL_TIER

    def test_negative_is_floor_not_sentinel(self):
        result = classify(-5)
        assert result is VERY_HARD
        assert result is not SENTINEL_TIER

    def test_small_negative_truncates_to_zero(self):
        assert classify(-0.5) is VERY_HARD

    def test_above_hundred(self):
        assert classify(250) is VERY_EASY

    def test_decimal_input_truncates(self):
        assert classify(Decimal("59.99")) is MEDIUM
        assert classify(Decimal("60.00")) is EASY

    def test_nan_is_treated_as_missing(self):
        assert classify(float("nan")) is SENTINEL_TIER
        assert classify(Decimal("NaN")) is SENTINEL_TIER

    def test_infinities(self):
        assert classify(math.inf) is VERY_EASY
        assert classify(-math.inf) is VERY_HARD
        assert classify(Decimal("Infinity")) is VERY_EASY
        assert classify(Decimal("-Infinity")) is VERY_HARD

    @pytest.mark.parametrize("score,expected", [
        ("1E+100000000", DifficultyLevel.VERY_EASY),
        ("-1E+100000000", DifficultyLevel.VERY_HARD),
        ("5.99E+1", DifficultyLevel.MEDIUM),
        ("1E-100000000", DifficultyLevel.VERY_HARD),
    ])
    def test_decimal_extreme_exponents(self, score, expected):
        started = time.perf_counter()
        assert classify(Decimal(score)).level == expected
        assert time.perf_counter() - started < 1.0

    def test_monotonic_in_score(self):
        scores = [s / 2 for s in range(-20, 221)]
        tiers = [classify(s) for s in scores]
        for lower, higher in zip(tiers, tiers[1:]):
            assert not is_lenienter_than(lower, higher)

    def test_idempotent(self):
        assert classify(42.42) is classify(42.42)


# =============================================================================
# Test Class: TestComparisons
# =============================================================================

class TestComparisons:
    """is_stricter_than / is_lenienter_than."""

    def test_hard_stricter_than_easy(self):
        assert is_stricter_than(HARD, EASY) is True
        assert is_lenienter_than(EASY, HARD) is True

    def test_easy_not_stricter_than_hard(self):
        assert is_stricter_than(EASY, HARD) is False

    def test_unknown_never_comparable(self):
        assert is_stricter_than(UNKNOWN, HARD) is False
        assert is_stricter_than(HARD, UNKNOWN) is False
        assert is_lenienter_than(UNKNOWN, HARD) is False
        assert is_lenienter_than(HARD, UNKNOWN) is False
        assert is_comparable(UNKNOWN, HARD) is False

    def test_unknown_vs_itself(self):
        assert is_stricter_than(UNKNOWN, UNKNOWN) is False
        assert is_lenienter_than(UNKNOWN, UNKNOWN) is False

    @pytest.mark.parametrize("tier", ORDERED)
    def test_irreflexive(self, tier: Tier):
        assert is_stricter_than(tier, tier) is False
        assert is_lenienter_than(tier, tier) is False
        assert is_comparable(tier, tier) is True

    @pytest.mark.parametrize("a", ORDERED)
    @pytest.mark.parametrize("b", ORDERED)
    def test_antisymmetric_and_dual(self, a: Tier, b: Tier):
        if is_stricter_than(a, b):
            assert is_stricter_than(b, a) is False
            assert is_lenienter_than(b, a) is True
        if a.rank != b.rank:
            assert is_stricter_than(a, b) != is_stricter_than(b, a)
