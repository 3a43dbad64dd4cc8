# Response shape configuration per Bedrock model family
from typing import Any, Dict

from ..models.generation import ModelFamily

# Paths into the decoded body. "completions_path" points at a list and
# "text_path" is read from each of its entries; "completion_path" points at
# a single completion (Claude's text completion API returns exactly one).
MODEL_FAMILIES: Dict[ModelFamily, Dict[str, Any]] = {
    ModelFamily.AI21: {
        "completions_path": ("completions",),
        "text_path": ("data", "text"),
        "finish_reason_path": ("completions", 0, "finishReason", "reason"),
        "id_path": ("id",),
    },
    ModelFamily.CLAUDE: {
        "completion_path": ("completion",),
        "finish_reason_path": ("stop_reason",),
        "id_path": None,
    },
    ModelFamily.COHERE: {
        "completions_path": ("generations",),
        "text_path": ("text",),
        "finish_reason_path": ("generations", 0, "finish_reason"),
        "id_path": ("id",),
    },
    ModelFamily.TITAN: {
        "completions_path": ("results",),
        "text_path": ("outputText",),
        "finish_reason_path": ("results", 0, "completionReason"),
        "id_path": None,
    },
}


def get_family_config(family: ModelFamily) -> Dict[str, Any]:
    """Return the response shape configuration for a model family."""
    if family not in MODEL_FAMILIES:
        raise ValueError(f"Unknown model family: {family}")
    return MODEL_FAMILIES[family]
