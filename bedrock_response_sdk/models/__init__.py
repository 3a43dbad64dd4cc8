"""Data models for the Bedrock response SDK."""

from .envelope import HttpResponse, ResponseEnvelope, ResponseOutput
from .generation import (
    BedrockCommand,
    GenerationResponse,
    ModelFamily,
    NormalizedFields,
)

__all__ = [
    # Envelope models
    "HttpResponse",
    "ResponseOutput",
    "ResponseEnvelope",

    # Generation models
    "BedrockCommand",
    "ModelFamily",
    "NormalizedFields",
    "GenerationResponse",
]
