"""Configuration for the Bedrock response SDK."""

from .model_families import MODEL_FAMILIES, get_family_config
from .settings import NormalizerSettings, load_settings

__all__ = [
    "MODEL_FAMILIES",
    "get_family_config",
    "NormalizerSettings",
    "load_settings",
]
