"""Normalization layer for Bedrock responses.

This layer handles:
- Payload decoding
- Safe lookups into decoded bodies
- Usage normalization from response headers
"""

from .accessors import get_list, get_path
from .body import decode_body
from .usage import normalize_usage, token_count_from_headers

__all__ = [
    "decode_body",
    "get_list",
    "get_path",
    "normalize_usage",
    "token_count_from_headers",
]
