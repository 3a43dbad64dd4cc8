"""
Provider Layer

Normalizes provider-specific response shapes into the SDK's uniform
interface.
"""

from .base import ProviderError, ResponseDecodeError, UnknownModelFamilyError
from .bedrock import BedrockResponse

__all__ = [
    "ProviderError",
    "ResponseDecodeError",
    "UnknownModelFamilyError",
    "BedrockResponse",
]
