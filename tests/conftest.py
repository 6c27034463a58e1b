"""Shared fixtures for MedInsight tests."""

import itertools

import pytest

from medinsight.core.models import ReviewAnalysis, Sentiment, Category


@pytest.fixture
def make_review():
    """Factory for review records with sensible defaults."""
    counter = itertools.count(1)

    def _make(sentiment=Sentiment.NEUTRAL, category=Category.OTHER, score=0.5, **overrides):
        n = next(counter)
        fields = {
            "id": f"r{n}",
            "original_text": f"Review number {n}",
            "sentiment": sentiment,
            "sentiment_score": score,
            "category": category,
            "summary": "Summary.",
            "improvement_suggestion": "Suggestion.",
            "timestamp": "2026-01-01T00:00:00+00:00",
        }
        fields.update(overrides)
        return ReviewAnalysis(**fields)

    return _make
