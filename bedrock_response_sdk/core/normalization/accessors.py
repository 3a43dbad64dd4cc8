"""Safe lookups into decoded JSON bodies."""

from typing import Any, Iterable, Optional, Sequence, Union

PathItem = Union[str, int]


def get_path(data: Any, path: Iterable[PathItem], default: Optional[Any] = None) -> Any:
    """
    Walk ``path`` through nested dicts and lists.
    
    String items index dicts, integer items index lists. A missing key,
    an out-of-range index, a null value or a container of the wrong type
    anywhere along the way yields ``default`` instead of raising.
    
    Example:
        >>> get_path({"results": [{"outputText": "x"}]}, ("results", 0, "outputText"))
        'x'
        >>> get_path({"results": []}, ("results", 0, "outputText")) is None
        True
    """
    current = data
    for item in path:
        if current is None:
            return default
        if isinstance(item, int):
            if not isinstance(current, (list, tuple)):
                return default
            if item >= len(current) or item < -len(current):
                return default
            current = current[item]
        else:
            if not isinstance(current, dict):
                return default
            current = current.get(item)
    return default if current is None else current


def get_list(data: Any, path: Sequence[PathItem]) -> list:
    """Return the list at ``path``, or an empty list when absent or not a list."""
    value = get_path(data, path)
    if isinstance(value, list):
        return value
    return []
