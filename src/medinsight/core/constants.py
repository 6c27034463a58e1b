"""Constants and configuration values for MedInsight."""

from .models import Sentiment, Category


# Classification Constants
class ClassificationConstants:
    """Constants for the external classification request."""

    # Prompt
    PROMPT_TEMPLATE = 'Analyze the following patient review for a hospital/clinic: "{text}"'
    SCHEMA_NAME = "review_classification"

    # Response Limits
    MAX_TOKENS = 500  # max tokens per classification response
    TEMPERATURE = 0.2  # low temperature for consistent labels

    # Defaults substituted for missing or unusable fields
    DEFAULT_SENTIMENT = Sentiment.NEUTRAL
    DEFAULT_SCORE = 0.0
    DEFAULT_CATEGORY = Category.OTHER
    DEFAULT_SUMMARY = "Summary unavailable"
    DEFAULT_SUGGESTION = "No specific advice"


# Fallback Classifier Constants
class KeywordConstants:
    """Keyword lists for the offline fallback classifier."""

    POSITIVE_WORDS = [
        "good", "great", "excellent", "amazing", "love", "perfect", "best",
        "kind", "professional", "spotless", "clean", "helpful", "thank",
    ]
    NEGATIVE_WORDS = [
        "bad", "terrible", "awful", "hate", "worst", "disappointing", "poor",
        "rude", "dirty", "unacceptable", "waited", "wait", "overcharged", "ignored",
    ]

    # Category -> trigger keywords, checked in this order
    CATEGORY_KEYWORDS = {
        Category.WAIT_TIME: ["wait", "waited", "waiting", "hours", "delay", "queue", "appointment"],
        Category.STAFF_BEHAVIOR: ["nurse", "nurses", "doctor", "staff", "rude", "kind", "receptionist"],
        Category.FACILITY_QUALITY: ["clean", "dirty", "room", "facility", "spotless", "parking", "food"],
        Category.MEDICAL_OUTCOME: ["treatment", "diagnosis", "surgery", "recovery", "pain", "cured"],
        Category.BILLING: ["bill", "billing", "charge", "charged", "insurance", "cost", "price"],
    }

    SCORE_PER_HIT = 0.25  # intensity added per matching keyword
    MAX_SCORE = 0.9  # rule-based scores never claim full confidence


# Display Constants
class DisplayConstants:
    """Lookup tables for rendering sentiment and category values."""

    SENTIMENT_STYLES = {
        Sentiment.POSITIVE: {"color": "#10b981", "markdown": "green", "icon": "👍"},
        Sentiment.NEGATIVE: {"color": "#f43f5e", "markdown": "red", "icon": "👎"},
        Sentiment.NEUTRAL: {"color": "#64748b", "markdown": "gray", "icon": "➖"},
    }

    CATEGORY_STYLE = {"color": "#3b82f6", "markdown": "blue"}

    PRIORITY_ITEMS = 3  # most recent reviews shown as action items
    MAX_EXCERPT_LENGTH = 240  # chars for review excerpts


# Demo Data Constants
class DemoDataConstants:
    """Example records shown before any review has been analyzed."""

    DEMO_REVIEWS = [
        {
            "id": "1",
            "original_text": (
                "The nurses were incredibly patient and the facility was spotless. "
                "I felt very well cared for during my stay."
            ),
            "sentiment": Sentiment.POSITIVE,
            "sentiment_score": 0.95,
            "category": Category.STAFF_BEHAVIOR,
            "summary": "High praise for nursing staff and cleanliness.",
            "improvement_suggestion": "Recognize the nursing team for their exceptional patient care.",
            "age_days": 1,
        },
        {
            "id": "2",
            "original_text": (
                "Waited for over 3 hours just to see a doctor for a 5-minute consultation. "
                "Completely unacceptable."
            ),
            "sentiment": Sentiment.NEGATIVE,
            "sentiment_score": 0.88,
            "category": Category.WAIT_TIME,
            "summary": "Extreme dissatisfaction with long wait times.",
            "improvement_suggestion": "Implement a more efficient triage or appointment scheduling system.",
            "age_days": 2,
        },
    ]


# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    EXPORT_FILENAME = "medinsight_reviews.json"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
