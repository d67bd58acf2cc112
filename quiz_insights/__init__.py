"""
Quiz Insights Backend Package.

FastAPI service layer for question difficulty on the quiz platform: classifies
correct answer rates into ordered difficulty tiers and builds per-question and
per-quiz difficulty reports.

Subpackages:
    - api: FastAPI route handlers
    - core: Configuration and dependencies
    - models: Pydantic schemas and enums
    - services: Business logic services
"""

__version__ = "1.0.0"
