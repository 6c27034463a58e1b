"""Tests for the domain model."""

import dataclasses

import pytest

from medinsight.core.models import Sentiment, Category, ReviewAnalysis, clamp_score


class TestVocabularies:
    """Test the closed sentiment and category vocabularies."""

    def test_labels(self):
        assert Sentiment.labels() == ["Positive", "Negative", "Neutral"]
        assert Category.labels() == [
            "Wait Time", "Staff Behavior", "Facility Quality", "Medical Outcome", "Billing", "Other"
        ]

    @pytest.mark.parametrize("raw, expected", [
        ("Positive", Sentiment.POSITIVE),
        ("negative", Sentiment.NEGATIVE),
        ("  NEUTRAL ", Sentiment.NEUTRAL),
        (Sentiment.POSITIVE, Sentiment.POSITIVE),
    ])
    def test_sentiment_coerce_known(self, raw, expected):
        assert Sentiment.coerce(raw) is expected

    @pytest.mark.parametrize("raw", ["Mixed", "", None, 1, "Wait Time"])
    def test_sentiment_coerce_unknown(self, raw):
        assert Sentiment.coerce(raw) is None

    def test_category_coerce_accepts_value_and_name(self):
        assert Category.coerce("Wait Time") is Category.WAIT_TIME
        assert Category.coerce("wait_time") is Category.WAIT_TIME
        assert Category.coerce("STAFF_BEHAVIOR") is Category.STAFF_BEHAVIOR
        assert Category.coerce("medical   outcome") is Category.MEDICAL_OUTCOME

    def test_category_coerce_unknown(self):
        assert Category.coerce("Parking") is None


class TestClampScore:
    """Test sentiment score clamping."""

    def test_in_range(self):
        assert clamp_score(0.42) == 0.42
        assert clamp_score("0.8") == 0.8

    def test_out_of_range(self):
        assert clamp_score(1.7) == 1.0
        assert clamp_score(-3) == 0.0

    @pytest.mark.parametrize("raw", [None, "high", True, float("nan"), [0.5]])
    def test_not_numeric(self, raw):
        assert clamp_score(raw) is None


class TestReviewAnalysis:
    """Test the review record."""

    def test_immutable(self, make_review):
        review = make_review()
        with pytest.raises(dataclasses.FrozenInstanceError):
            review.summary = "changed"

    def test_to_dict_uses_labels(self, make_review):
        review = make_review(sentiment=Sentiment.POSITIVE, category=Category.BILLING)
        data = review.to_dict()
        assert data["sentiment"] == "Positive"
        assert data["category"] == "Billing"
        assert data["id"] == review.id
        assert set(data) == {f.name for f in dataclasses.fields(ReviewAnalysis)}
