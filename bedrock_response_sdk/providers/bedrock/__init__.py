"""Bedrock runtime response handling."""

from .parsers import PARSERS, parse_body
from .response import BedrockResponse, resolve_model_family

__all__ = [
    "BedrockResponse",
    "PARSERS",
    "parse_body",
    "resolve_model_family",
]
