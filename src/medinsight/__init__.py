"""MedInsight - AI-powered patient feedback analysis dashboard."""

__version__ = "1.0.0"

from .core.models import *
from .core.config import settings
from .core.state import ReviewController
from .services.llm import ClassifierFactory

__all__ = [
    "settings",
    "ReviewController",
    "ClassifierFactory",
]
