"""Unit tests for response envelope models."""

import httpx
import pytest
from pydantic import ValidationError

from bedrock_response_sdk.models.envelope import (
    HttpResponse,
    ResponseEnvelope,
    ResponseOutput,
)


@pytest.mark.unit
class TestFromMiddleware:
    """Test building envelopes from the AWS SDK middleware shape."""

    def test_full_shape(self):
        envelope = ResponseEnvelope.from_middleware({
            "response": {
                "headers": {"x-amzn-bedrock-input-token-count": "3"},
                "statusCode": 200,
                "reason": "OK",
            },
            "output": {
                "$metadata": {"requestId": "eda0760a-c3f0-4fc1-9a1e-75559d642866"},
                "body": b'{"completion": "hi"}',
            },
        })

        assert envelope.response.headers == {"x-amzn-bedrock-input-token-count": "3"}
        assert envelope.response.status_code == 200
        assert envelope.response.reason == "OK"
        assert envelope.output.request_id == "eda0760a-c3f0-4fc1-9a1e-75559d642866"
        assert envelope.output.body == b'{"completion": "hi"}'

    def test_request_id_fallback(self):
        envelope = ResponseEnvelope.from_middleware({
            "response": {"statusCode": 200},
            "output": {"requestId": "req-1", "body": b"{}"},
        })
        assert envelope.output.request_id == "req-1"

    def test_output_request_id_wins_over_metadata(self):
        envelope = ResponseEnvelope.from_middleware({
            "response": {"statusCode": 200},
            "output": {
                "requestId": "output-id",
                "$metadata": {"requestId": "meta-id"},
                "body": b"{}",
            },
        })
        assert envelope.output.request_id == "output-id"

    def test_null_metadata_request_id_keeps_output_id(self):
        envelope = ResponseEnvelope.from_middleware({
            "response": {"statusCode": 200},
            "output": {
                "requestId": "output-id",
                "$metadata": {"requestId": None},
                "body": b"{}",
            },
        })
        assert envelope.output.request_id == "output-id"

    def test_null_output_request_id_falls_back_to_metadata(self):
        envelope = ResponseEnvelope.from_middleware({
            "response": {"statusCode": 200},
            "output": {
                "requestId": None,
                "$metadata": {"requestId": "meta-id"},
                "body": b"{}",
            },
        })
        assert envelope.output.request_id == "meta-id"

    def test_uint8_array_body(self):
        envelope = ResponseEnvelope.from_middleware({
            "response": {"statusCode": 200},
            "output": {"body": list(b'{"id": "x"}')},
        })
        assert envelope.output.body == b'{"id": "x"}'

    def test_missing_headers_default_to_empty(self):
        envelope = ResponseEnvelope.from_middleware({
            "response": {"statusCode": 200, "headers": None},
            "output": {"body": b"{}"},
        })
        assert envelope.response.headers == {}

    def test_bytearray_and_memoryview_body(self):
        assert ResponseOutput(body=bytearray(b"{}")).body == b"{}"
        assert ResponseOutput(body=memoryview(b"{}")).body == b"{}"


@pytest.mark.unit
class TestFromHttpx:
    """Test building envelopes from httpx responses."""

    def test_httpx_response(self):
        response = httpx.Response(
            200,
            headers={
                "X-Amzn-RequestId": "req-httpx",
                "X-Amzn-Bedrock-Output-Token-Count": "12",
            },
            content=b'{"results": [{"outputText": "x"}]}',
        )

        envelope = ResponseEnvelope.from_httpx(response)

        assert envelope.response.status_code == 200
        assert envelope.response.reason == "OK"
        assert envelope.response.headers["x-amzn-bedrock-output-token-count"] == "12"
        assert envelope.output.request_id == "req-httpx"
        assert envelope.output.body == b'{"results": [{"outputText": "x"}]}'


@pytest.mark.unit
class TestImmutability:
    """Envelopes are frozen."""

    def test_cannot_reassign_fields(self):
        envelope = ResponseEnvelope(
            response=HttpResponse(status_code=200),
            output=ResponseOutput(body=b"{}"),
        )
        with pytest.raises(ValidationError):
            envelope.response.status_code = 500
