"""Tests for the classification client.

Note: These tests use a mocked OpenAI client to avoid API costs.
"""

import json
from unittest.mock import Mock, patch

import pytest

from medinsight.core.config import settings
from medinsight.core.exceptions import ClassificationFailed
from medinsight.services.llm import (
    ClassifierFactory,
    OpenAIClassifier,
    KeywordClassifier,
    parse_classification,
)


def _response(content):
    return Mock(choices=[Mock(message=Mock(content=content))])


@pytest.fixture
def mock_client():
    return Mock()


@pytest.fixture
def classifier(mock_client):
    return OpenAIClassifier(client=mock_client, model="test-model")


class TestParseClassification:
    """Test response payload parsing."""

    def test_maps_keys(self):
        payload = json.dumps({
            "sentiment": "Positive",
            "sentimentScore": 0.9,
            "category": "Staff Behavior",
            "summary": "Kind nurses.",
            "improvementSuggestion": "Thank the team.",
        })
        assert parse_classification(payload) == {
            "sentiment": "Positive",
            "sentiment_score": 0.9,
            "category": "Staff Behavior",
            "summary": "Kind nurses.",
            "improvement_suggestion": "Thank the team.",
        }

    def test_missing_keys_are_omitted(self):
        assert parse_classification('{"sentiment": "Negative"}') == {"sentiment": "Negative"}

    def test_out_of_vocabulary_values_pass_through(self):
        assert parse_classification('{"category": "Parking"}') == {"category": "Parking"}

    def test_code_fences(self):
        assert parse_classification('```json\n{"summary": "ok"}\n```') == {"summary": "ok"}

    @pytest.mark.parametrize("content", [None, "", "   ", "not json", "{\"sentiment\": ", "[1, 2]", "42"])
    def test_unusable_payload(self, content):
        with pytest.raises(ClassificationFailed):
            parse_classification(content)


class TestOpenAIClassifier:
    """Test the OpenAI-backed classifier."""

    def test_classify_success(self, classifier, mock_client):
        mock_client.chat.completions.create.return_value = _response(
            '{"sentiment": "Negative", "sentimentScore": 0.7, "category": "Wait Time", '
            '"summary": "Long wait.", "improvementSuggestion": "Add staff."}'
        )

        result = classifier.classify("Waited four hours.")

        assert result["sentiment"] == "Negative"
        assert result["sentiment_score"] == 0.7
        assert result["category"] == "Wait Time"
        mock_client.chat.completions.create.assert_called_once()

    def test_request_shape(self, classifier, mock_client):
        mock_client.chat.completions.create.return_value = _response('{"summary": "ok"}')

        classifier.classify("The room was dirty.")

        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert "The room was dirty." in kwargs["messages"][-1]["content"]
        response_format = kwargs["response_format"]
        assert response_format["type"] == "json_schema"
        schema = response_format["json_schema"]["schema"]
        assert schema["required"] == ["sentiment", "sentimentScore", "category", "summary", "improvementSuggestion"]

    def test_transport_error(self, classifier, mock_client):
        error = RuntimeError("connection reset")
        mock_client.chat.completions.create.side_effect = error

        with pytest.raises(ClassificationFailed) as exc_info:
            classifier.classify("text")

        assert exc_info.value.__cause__ is error
        assert exc_info.value.to_dict()["error_type"] == "ClassificationFailed"
        mock_client.chat.completions.create.assert_called_once()

    def test_malformed_json(self, classifier, mock_client):
        mock_client.chat.completions.create.return_value = _response("Sure! Here is the analysis")

        with pytest.raises(ClassificationFailed):
            classifier.classify("text")

        mock_client.chat.completions.create.assert_called_once()


class TestKeywordClassifier:
    """Test the offline fallback classifier."""

    def setup_method(self):
        self.classifier = KeywordClassifier()

    def test_negative_wait(self):
        result = self.classifier.classify("The nurses were rude and I waited for hours")
        assert result["sentiment"] == "Negative"
        assert result["category"] == "Wait Time"
        assert result["sentiment_score"] == 0.5

    def test_positive_staff(self):
        result = self.classifier.classify("Excellent and kind doctor, great care")
        assert result["sentiment"] == "Positive"
        assert result["category"] == "Staff Behavior"
        assert 0.0 < result["sentiment_score"] <= 1.0

    def test_neutral_other(self):
        result = self.classifier.classify("I visited on Tuesday.")
        assert result["sentiment"] == "Neutral"
        assert result["category"] == "Other"
        assert result["sentiment_score"] == 0.0
        assert result["summary"]
        assert result["improvement_suggestion"]


class TestClassifierFactory:
    """Test classifier selection."""

    def test_without_key(self, monkeypatch):
        monkeypatch.setattr(settings, "openai_api_key", "")
        monkeypatch.setattr(settings, "OPENAI_API_KEY", "")
        assert isinstance(ClassifierFactory.create(), KeywordClassifier)

    def test_with_key(self, monkeypatch):
        monkeypatch.setattr(settings, "openai_api_key", "sk-test")
        with patch("medinsight.services.llm.openai.OpenAI") as mock_openai:
            classifier = ClassifierFactory.create()
        assert isinstance(classifier, OpenAIClassifier)
        mock_openai.assert_called_once_with(api_key="sk-test")
