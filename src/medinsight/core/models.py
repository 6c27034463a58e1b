"""Data models for MedInsight."""

import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, List, Tuple, Any, Dict


class _LabelEnum(Enum):
    """Enum whose values are display labels."""

    @classmethod
    def coerce(cls, value: Any):
        """Map a free-form label to a member, or None if it is not one."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = " ".join(value.replace("_", " ").split()).lower()
        if not key:
            return None
        for member in cls:
            if key in (member.value.lower(), member.name.replace("_", " ").lower()):
                return member
        return None

    @classmethod
    def labels(cls) -> List[str]:
        return [member.value for member in cls]


class Sentiment(_LabelEnum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class Category(_LabelEnum):
    WAIT_TIME = "Wait Time"
    STAFF_BEHAVIOR = "Staff Behavior"
    FACILITY_QUALITY = "Facility Quality"
    MEDICAL_OUTCOME = "Medical Outcome"
    BILLING = "Billing"
    OTHER = "Other"


def clamp_score(value: Any) -> Optional[float]:
    """Clamp a sentiment intensity to [0.0, 1.0]; None if not numeric."""
    if isinstance(value, bool):
        return None
    try:
        score = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(score):
        return None
    return max(0.0, min(1.0, score))


@dataclass(frozen=True)
class ReviewAnalysis:
    """One analyzed patient review. Immutable once created."""
    id: str
    original_text: str
    sentiment: Sentiment
    sentiment_score: float  # 0 to 1, intensity not polarity
    category: Category
    summary: str
    improvement_suggestion: str
    timestamp: str  # ISO-8601

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["sentiment"] = self.sentiment.value
        data["category"] = self.category.value
        return data


@dataclass
class DashboardStats:
    """Derived statistics over the review collection."""
    total: int
    positive_percent: int
    negative_percent: int
    sentiment_distribution: List[Tuple[str, int]]
    category_distribution: List[Tuple[str, int]]
    average_score: float = 0.0
