'''
Quiz Insights Test Suite

Test Modules:
-------------
- test_tiering.py: Tier classification and comparison
  - Inclusive lower bounds, truncation toward zero
  - UNKNOWN for missing data vs VERY_HARD for below-floor scores
  - Sentinel excluded from stricter/lenienter comparisons

- test_difficulty.py: Single-question difficulty analysis
  - Half-up percentage rates
  - Recommendations, skip-rate and distractor notes

- test_breakdown.py: Per-quiz difficulty breakdown
  - DataFrame classification and distribution summary

- test_api.py: Endpoint handlers awaited directly

Running Tests:
--------------
    pip install -e ".[test]"
    pytest quiz_insights/tests/ -v

Configuration:
--------------
See conftest.py for shared fixtures.
'''

__all__ = []
