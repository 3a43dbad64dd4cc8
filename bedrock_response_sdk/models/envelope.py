"""
Response envelope models.

The envelope is what the transport layer hands to the normalizer: the
HTTP-level response (headers, status) and the application-level output
(request id and the raw payload bytes). Two shapes are supported, the AWS
SDK middleware result and a plain ``httpx.Response`` from the Bedrock
runtime REST endpoint.
"""

from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config.constants import REQUEST_ID_HEADER


class HttpResponse(BaseModel):
    """HTTP-level part of a response."""
    model_config = ConfigDict(frozen=True)

    headers: Dict[str, Any] = Field(default_factory=dict)
    status_code: Optional[int] = None
    reason: Optional[str] = None

    @field_validator("headers", mode="before")
    def default_headers(cls, v):
        return {} if v is None else v


class ResponseOutput(BaseModel):
    """Application-level part of a response."""
    model_config = ConfigDict(frozen=True)

    request_id: Optional[str] = None
    body: bytes = b""

    @field_validator("body", mode="before")
    def coerce_body(cls, v):
        # Uint8Array payloads arrive as bytes-like objects or lists of ints
        if v is None:
            return b""
        if isinstance(v, (bytearray, memoryview)):
            return bytes(v)
        if isinstance(v, (list, tuple)):
            return bytes(v)
        return v


class ResponseEnvelope(BaseModel):
    """A complete response as received from the Bedrock runtime."""
    model_config = ConfigDict(frozen=True)

    response: HttpResponse
    output: ResponseOutput

    @classmethod
    def from_middleware(cls, raw: Mapping[str, Any]) -> "ResponseEnvelope":
        """
        Build an envelope from the AWS SDK middleware result shape.
        
        Expected shape::
        
            {
                "response": {"headers": {...}, "statusCode": 200, "reason": "OK"},
                "output": {"requestId": "...", "$metadata": {"requestId": "..."}, "body": b"..."}
            }

        ``output.requestId`` is used when set, otherwise ``$metadata.requestId``.

        Args:
            raw: Middleware result dictionary
            
        Returns:
            ResponseEnvelope
        """
        response = raw.get("response") or {}
        output = raw.get("output") or {}
        metadata = output.get("$metadata") or {}

        # output.requestId is authoritative, $metadata only fills the gap
        request_id = output.get("requestId")
        if request_id is None:
            request_id = metadata.get("requestId")

        return cls(
            response=HttpResponse(
                headers=response.get("headers"),
                status_code=response.get("statusCode", response.get("status_code")),
                reason=response.get("reason"),
            ),
            output=ResponseOutput(
                request_id=request_id,
                body=output.get("body"),
            ),
        )

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "ResponseEnvelope":
        """Build an envelope from a Bedrock runtime REST response."""
        headers = {key.lower(): value for key, value in response.headers.items()}
        return cls(
            response=HttpResponse(
                headers=headers,
                status_code=response.status_code,
                reason=response.reason_phrase,
            ),
            output=ResponseOutput(
                request_id=headers.get(REQUEST_ID_HEADER),
                body=response.content,
            ),
        )
