"""Shared pytest fixtures for Bedrock Response SDK tests."""

import json

import pytest

from bedrock_response_sdk.models.envelope import (
    HttpResponse,
    ResponseEnvelope,
    ResponseOutput,
)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no external collaborators")
    config.addinivalue_line("markers", "integration: tests crossing module boundaries")


class FakeCommand:
    """Classifier double exposing the four family predicates."""

    def __init__(self, family=None):
        self.family = family

    def is_ai21(self):
        return self.family == "ai21"

    def is_claude(self):
        return self.family == "claude"

    def is_cohere(self):
        return self.family == "cohere"

    def is_titan(self):
        return self.family == "titan"


@pytest.fixture
def make_command():
    """Factory for classifier doubles."""
    return FakeCommand


@pytest.fixture
def make_envelope():
    """Factory building a ResponseEnvelope around a body."""
    def _make(body, headers=None, status_code=200, reason="OK", request_id="req-1234"):
        if not isinstance(body, (bytes, bytearray)):
            body = json.dumps(body).encode("utf-8")
        return ResponseEnvelope(
            response=HttpResponse(
                headers=headers if headers is not None else {},
                status_code=status_code,
                reason=reason,
            ),
            output=ResponseOutput(request_id=request_id, body=body),
        )
    return _make


@pytest.fixture
def usage_headers():
    """Bedrock usage headers."""
    return {
        "content-type": "application/json",
        "x-amzn-bedrock-input-token-count": "25",
        "x-amzn-bedrock-output-token-count": "10",
    }


@pytest.fixture
def ai21_body():
    """Sample AI21 Jurassic response body."""
    return {
        "id": 1234,
        "completions": [
            {
                "data": {"text": "ai21-response-1"},
                "finishReason": {"reason": "endoftext"},
            },
            {
                "data": {"text": "ai21-response-2"},
                "finishReason": {"reason": "length"},
            },
        ],
    }


@pytest.fixture
def claude_body():
    """Sample Claude text completion response body."""
    return {
        "completion": "claude-response",
        "stop_reason": "stop_sequence",
    }


@pytest.fixture
def cohere_body():
    """Sample Cohere Command response body."""
    return {
        "id": "cohere-response-id",
        "generations": [
            {"text": "cohere-response-1", "finish_reason": "COMPLETE"},
            {"text": "cohere-response-2", "finish_reason": "MAX_TOKENS"},
        ],
    }


@pytest.fixture
def titan_body():
    """Sample Amazon Titan text response body."""
    return {
        "inputTextTokenCount": 6,
        "results": [
            {"outputText": "titan-response", "completionReason": "FINISH"},
        ],
    }
