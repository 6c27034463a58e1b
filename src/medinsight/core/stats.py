"""Aggregation of analyzed reviews into dashboard statistics."""

import math
from typing import Sequence, List, Tuple, Dict

from .models import ReviewAnalysis, DashboardStats, Sentiment


def _percent(count: int, total: int) -> int:
    """Whole-number percentage with halves rounded up; 0 for an empty total."""
    if not total:
        return 0
    return int(math.floor(100.0 * count / total + 0.5))


def sentiment_counts(reviews: Sequence[ReviewAnalysis]) -> List[Tuple[str, int]]:
    """Count per sentiment, always Positive, Negative, Neutral in that order."""
    counts = {s: 0 for s in Sentiment}
    for r in reviews:
        counts[r.sentiment] = counts.get(r.sentiment, 0) + 1
    return [(s.value, counts[s]) for s in Sentiment]


def category_counts(reviews: Sequence[ReviewAnalysis]) -> List[Tuple[str, int]]:
    """Count per category present in the data, in first-seen order."""
    counts: Dict[str, int] = {}
    for r in reviews:
        name = r.category.value
        counts[name] = counts.get(name, 0) + 1
    return list(counts.items())


def aggregate(reviews: Sequence[ReviewAnalysis]) -> DashboardStats:
    """Compute display statistics for the current review collection.

    Pure and deterministic: the result depends only on ``reviews``.
    """
    total = len(reviews)
    sentiments = sentiment_counts(reviews)
    by_name = dict(sentiments)

    average = sum(r.sentiment_score for r in reviews) / total if total else 0.0

    return DashboardStats(
        total=total,
        positive_percent=_percent(by_name[Sentiment.POSITIVE.value], total),
        negative_percent=_percent(by_name[Sentiment.NEGATIVE.value], total),
        sentiment_distribution=sentiments,
        category_distribution=category_counts(reviews),
        average_score=average,
    )
