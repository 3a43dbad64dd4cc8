"""
Usage normalization module.

Bedrock reports token usage in response headers rather than in the body.
These helpers read those headers and produce the standard usage shape:
{
    "prompt_tokens": int,
    "completion_tokens": int,
    "total_tokens": int,
    "cache_info": dict
}
"""

from typing import Any, Dict, Mapping, Optional


def _lookup_header(headers: Optional[Mapping[str, Any]], name: str) -> Any:
    if not headers:
        return None
    if name in headers:
        return headers[name]
    # Header names are case-insensitive on the wire
    lowered = name.lower()
    for key, value in headers.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return None


def token_count_from_headers(headers: Optional[Mapping[str, Any]], header_name: str) -> int:
    """
    Read a token count header as a base-10 integer.
    
    Absent or falsy values count as 0. Values that are not integers are
    passed to ``int()`` unchanged, so a malformed header raises ValueError.
    
    Args:
        headers: Response header mapping
        header_name: Header holding the count
        
    Returns:
        int: The token count
    """
    value = _lookup_header(headers, header_name)
    if not value:
        return 0
    if isinstance(value, bytes):
        value = value.decode("ascii")
    if isinstance(value, str):
        return int(value, 10)
    return int(value)


def normalize_usage(
    prompt_tokens: Optional[int] = None,
    completion_tokens: Optional[int] = None,
    cache_info: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Build a usage dict in standard SDK format.
    
    Args:
        prompt_tokens: Input token count
        completion_tokens: Output token count
        cache_info: Cache information if available
        
    Returns:
        Dict with normalized usage data
    """
    normalized = {
        "prompt_tokens": int(prompt_tokens or 0),
        "completion_tokens": int(completion_tokens or 0),
        "total_tokens": 0,
        "cache_info": dict(cache_info) if cache_info else {}
    }
    normalized["total_tokens"] = normalized["prompt_tokens"] + normalized["completion_tokens"]
    return normalized
