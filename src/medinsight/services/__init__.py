"""Services for MedInsight."""

from .llm import ClassifierFactory, OpenAIClassifier, KeywordClassifier

__all__ = [
    "ClassifierFactory",
    "OpenAIClassifier",
    "KeywordClassifier",
]
