"""Core modules for MedInsight."""

from .models import *
from .config import settings
from .exceptions import MedInsightError, ClassificationFailed
from .stats import aggregate
from .state import ReviewController, build_review, demo_reviews

__all__ = [
    "settings",
    "Sentiment",
    "Category",
    "ReviewAnalysis",
    "DashboardStats",
    "MedInsightError",
    "ClassificationFailed",
    "aggregate",
    "ReviewController",
    "build_review",
    "demo_reviews",
]
