"""Review collection state and the classify -> normalize -> insert sequence."""

import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Any, Iterable, List, Optional, Tuple

from .constants import ClassificationConstants, DemoDataConstants
from .models import ReviewAnalysis, DashboardStats, Sentiment, Category, clamp_score
from .stats import aggregate

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


def _text_or_default(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def build_review(review_id: str, text: str, classification: Dict[str, Any], timestamp: str) -> ReviewAnalysis:
    """Build a record from a partial classification, filling in defaults.

    Sentiment and category values outside the closed vocabularies are coerced
    to the defaults; the score is clamped to [0, 1].
    """
    raw_sentiment = classification.get("sentiment")
    sentiment = Sentiment.coerce(raw_sentiment)
    if sentiment is None:
        if raw_sentiment:
            logger.warning(f"Unknown sentiment {raw_sentiment!r}, using {ClassificationConstants.DEFAULT_SENTIMENT.value}")
        sentiment = ClassificationConstants.DEFAULT_SENTIMENT

    raw_category = classification.get("category")
    category = Category.coerce(raw_category)
    if category is None:
        if raw_category:
            logger.warning(f"Unknown category {raw_category!r}, using {ClassificationConstants.DEFAULT_CATEGORY.value}")
        category = ClassificationConstants.DEFAULT_CATEGORY

    score = clamp_score(classification.get("sentiment_score"))
    if score is None:
        score = ClassificationConstants.DEFAULT_SCORE

    return ReviewAnalysis(
        id=review_id,
        original_text=text,
        sentiment=sentiment,
        sentiment_score=score,
        category=category,
        summary=_text_or_default(classification.get("summary"), ClassificationConstants.DEFAULT_SUMMARY),
        improvement_suggestion=_text_or_default(
            classification.get("improvement_suggestion"), ClassificationConstants.DEFAULT_SUGGESTION
        ),
        timestamp=timestamp,
    )


def demo_reviews(now: Optional[datetime] = None) -> List[ReviewAnalysis]:
    """The example records the dashboard starts with, newest first."""
    now = now or _utc_now()
    reviews = []
    for item in DemoDataConstants.DEMO_REVIEWS:
        fields = {k: v for k, v in item.items() if k != "age_days"}
        fields["timestamp"] = (now - timedelta(days=item["age_days"])).isoformat()
        reviews.append(ReviewAnalysis(**fields))
    return reviews


class ReviewController:
    """Owns the review collection and orchestrates submissions.

    At most one classification is in flight; a submission made while one is
    pending is rejected rather than queued.
    """

    def __init__(
        self,
        classifier,
        initial_reviews: Iterable[ReviewAnalysis] = (),
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = _new_id,
    ):
        self.classifier = classifier
        self._clock = clock
        self._id_factory = id_factory
        self._reviews: List[ReviewAnalysis] = []
        self._ids = set()
        self._in_flight = threading.Lock()

        for review in initial_reviews:
            if review.id in self._ids:
                raise ValueError(f"Duplicate review id: {review.id}")
            self._reviews.append(review)
            self._ids.add(review.id)

    @property
    def reviews(self) -> Tuple[ReviewAnalysis, ...]:
        """Snapshot of the collection, newest first."""
        return tuple(self._reviews)

    @property
    def is_analyzing(self) -> bool:
        return self._in_flight.locked()

    def stats(self) -> DashboardStats:
        return aggregate(self.reviews)

    def _unique_id(self) -> str:
        review_id = self._id_factory()
        while review_id in self._ids:
            review_id = self._id_factory()
        return review_id

    def submit(self, text: str) -> Optional[ReviewAnalysis]:
        """Classify ``text`` and prepend the resulting record.

        Returns the new record, or None when the text is blank or another
        submission is in flight. ClassificationFailed propagates to the caller
        with the collection left unchanged.
        """
        if not text or not text.strip():
            return None

        if not self._in_flight.acquire(blocking=False):
            logger.info("Submission ignored: a classification is already in flight")
            return None

        try:
            classification = self.classifier.classify(text)
            review = build_review(self._unique_id(), text, classification, self._clock().isoformat())
            self._reviews.insert(0, review)
            self._ids.add(review.id)
            logger.info(f"Added review {review.id}: {review.sentiment.value} / {review.category.value}")
            return review
        finally:
            self._in_flight.release()
