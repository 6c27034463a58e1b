"""LLM service for patient review classification."""

import json
import logging
import re
from typing import Dict, Any, Optional

import openai
from tenacity import retry, stop_after_attempt, wait_exponential

from ..core.config import settings
from ..core.constants import ClassificationConstants, KeywordConstants
from ..core.exceptions import ClassificationFailed
from ..core.models import Sentiment, Category

logger = logging.getLogger(__name__)

CLASSIFICATION_SCHEMA = {
    "type": "object",
    "properties": {
        "sentiment": {
            "type": "string",
            "description": "Must be one of: " + ", ".join(Sentiment.labels())
        },
        "sentimentScore": {
            "type": "number",
            "description": "A score from 0.0 to 1.0 representing the intensity (1 is strongly positive/negative, 0 is truly neutral)"
        },
        "category": {
            "type": "string",
            "description": "The primary subject. One of: " + ", ".join(Category.labels())
        },
        "summary": {
            "type": "string",
            "description": "A concise 1-sentence summary of the core issue or praise"
        },
        "improvementSuggestion": {
            "type": "string",
            "description": "Actionable advice for the hospital management based on this review"
        }
    },
    "required": ["sentiment", "sentimentScore", "category", "summary", "improvementSuggestion"],
    "additionalProperties": False
}

# response key -> partial record key
_FIELD_MAP = {
    "sentiment": "sentiment",
    "sentimentScore": "sentiment_score",
    "category": "category",
    "summary": "summary",
    "improvementSuggestion": "improvement_suggestion",
}


def _strip_code_fences(s: str) -> str:
    s = s.strip()
    return re.sub(r"^```(?:json)?|```$", "", s, flags=re.IGNORECASE|re.MULTILINE).strip()


def parse_classification(content: Optional[str]) -> Dict[str, Any]:
    """Parse the response payload into a partial classification.

    Raises ClassificationFailed when the payload is empty or is not a JSON object.
    """
    if not content or not content.strip():
        raise ClassificationFailed("empty response payload")
    try:
        data = json.loads(_strip_code_fences(content))
    except json.JSONDecodeError as e:
        raise ClassificationFailed("response is not valid JSON", e) from e
    if not isinstance(data, dict):
        raise ClassificationFailed(f"expected a JSON object, got {type(data).__name__}")
    return {ours: data[theirs] for theirs, ours in _FIELD_MAP.items() if theirs in data}


class ClassifierFactory:
    """Factory for creating review classifiers."""

    @staticmethod
    def create():
        """Create appropriate classifier."""
        if settings.effective_openai_key:
            return OpenAIClassifier()
        else:
            return KeywordClassifier()


class OpenAIClassifier:
    """OpenAI-based review classifier."""

    def __init__(self, client=None, model: Optional[str] = None):
        self.client = client or openai.OpenAI(api_key=settings.effective_openai_key)
        self.model = model or settings.openai_model
        logger.info(f"OpenAI classifier initialized with model {self.model}")

    @retry(
        stop=stop_after_attempt(max(1, settings.max_retries)),
        wait=wait_exponential(multiplier=settings.retry_delay, max=settings.retry_backoff * 10),
        reraise=True
    )
    def _request(self, text: str) -> str:
        kwargs = {}
        if settings.request_timeout is not None:
            kwargs["timeout"] = settings.request_timeout
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "user", "content": ClassificationConstants.PROMPT_TEMPLATE.format(text=text)}
            ],
            max_tokens=ClassificationConstants.MAX_TOKENS,
            temperature=ClassificationConstants.TEMPERATURE,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": ClassificationConstants.SCHEMA_NAME,
                    "schema": CLASSIFICATION_SCHEMA,
                    "strict": True
                }
            },
            **kwargs
        )
        return response.choices[0].message.content

    def classify(self, text: str) -> Dict[str, Any]:
        """Classify one review text.

        Returns a partial record with any of the keys sentiment, sentiment_score,
        category, summary and improvement_suggestion. Values are passed through
        as the service returned them.
        """
        try:
            content = self._request(text)
        except Exception as e:
            logger.error(f"OpenAI classification failed: {e}")
            raise ClassificationFailed("request to classification service failed", e) from e

        result = parse_classification(content)
        logger.debug(f"Classified review as {result.get('sentiment')}/{result.get('category')}")
        return result


class KeywordClassifier:
    """Fallback classifier using simple keyword rules."""

    def __init__(self):
        logger.info("Using fallback keyword classifier")

    def classify(self, text: str) -> Dict[str, Any]:
        """Simple rule-based classification."""
        logger.warning("Fallback classifier called - no actual LLM available")
        words = re.findall(r"[a-z]+", text.lower())

        pos_count = sum(1 for w in words if w in KeywordConstants.POSITIVE_WORDS)
        neg_count = sum(1 for w in words if w in KeywordConstants.NEGATIVE_WORDS)

        if pos_count > neg_count:
            sentiment = Sentiment.POSITIVE
        elif neg_count > pos_count:
            sentiment = Sentiment.NEGATIVE
        else:
            sentiment = Sentiment.NEUTRAL

        if sentiment is Sentiment.NEUTRAL:
            score = 0.0
        else:
            score = min(KeywordConstants.MAX_SCORE, abs(pos_count - neg_count) * KeywordConstants.SCORE_PER_HIT)

        category = Category.OTHER
        for candidate, keywords in KeywordConstants.CATEGORY_KEYWORDS.items():
            if any(w in keywords for w in words):
                category = candidate
                break

        return {
            "sentiment": sentiment.value,
            "sentiment_score": score,
            "category": category.value,
            "summary": f"{sentiment.value} feedback about {category.value.lower()}.",
            "improvement_suggestion": f"Review recent {category.value.lower()} feedback with the responsible team.",
        }
