from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from ...config.model_families import get_family_config
from ...core.normalization.accessors import get_list, get_path
from ...models.generation import ModelFamily, NormalizedFields


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def extract_completions(body: Any, family: ModelFamily) -> List[str]:
    """Collect completion texts from a decoded body, skipping entries without text."""
    config = get_family_config(family)

    if "completion_path" in config:
        completion = get_path(body, config["completion_path"])
        return [_as_text(completion)] if completion else []

    completions = []
    for entry in get_list(body, config["completions_path"]):
        text = get_path(entry, config["text_path"])
        if text is not None:
            completions.append(_as_text(text))
    return completions


def extract_finish_reason(body: Any, family: ModelFamily) -> Optional[str]:
    """Read the finish reason; None when the body does not carry one."""
    config = get_family_config(family)
    return _as_text(get_path(body, config["finish_reason_path"]))


def extract_id(body: Any, family: ModelFamily) -> Optional[str]:
    """Read the provider-supplied response id for families that return one."""
    config = get_family_config(family)
    if config["id_path"] is None:
        return None
    return _as_text(get_path(body, config["id_path"]))


def parse_body(body: Any, family: ModelFamily) -> NormalizedFields:
    """Extract completions, finish reason and id for ``family`` in one pass."""
    return NormalizedFields(
        completions=tuple(extract_completions(body, family)),
        finish_reason=extract_finish_reason(body, family),
        id=extract_id(body, family),
    )


def parse_ai21(body: Any) -> NormalizedFields:
    return parse_body(body, ModelFamily.AI21)


def parse_claude(body: Any) -> NormalizedFields:
    return parse_body(body, ModelFamily.CLAUDE)


def parse_cohere(body: Any) -> NormalizedFields:
    return parse_body(body, ModelFamily.COHERE)


def parse_titan(body: Any) -> NormalizedFields:
    return parse_body(body, ModelFamily.TITAN)


PARSERS: Dict[ModelFamily, Callable[[Any], NormalizedFields]] = {
    ModelFamily.AI21: parse_ai21,
    ModelFamily.CLAUDE: parse_claude,
    ModelFamily.COHERE: parse_cohere,
    ModelFamily.TITAN: parse_titan,
}
