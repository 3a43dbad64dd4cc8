"""Payload decoding for Bedrock responses."""

import json
from typing import Any

# utf-8-sig drops a leading byte order mark, which json.loads would reject
BODY_ENCODING = "utf-8-sig"


def decode_body(body: bytes) -> Any:
    """
    Decode a raw payload into a JSON value.
    
    Args:
        body: UTF-8 encoded JSON document
        
    Returns:
        The parsed JSON value (usually a dict)
        
    Raises:
        UnicodeDecodeError: If the payload is not valid UTF-8
        json.JSONDecodeError: If the payload is not a JSON document
    """
    text = bytes(body).decode(BODY_ENCODING)
    return json.loads(text)
