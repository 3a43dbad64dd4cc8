"""
Bedrock Response SDK - normalized access to AWS Bedrock model responses.

Bedrock returns a different JSON body for each model family it serves.
This package decodes those bodies and exposes one interface for:
- AI21 (Jurassic models)
- Anthropic Claude (text completions API)
- Cohere (Command models)
- Amazon Titan (text models)

Features:
- One decode pass per response, immutable results
- Completions, finish reason and response id per family
- Token counts from Bedrock usage headers
- Conversion to a provider-neutral GenerationResponse
"""

__version__ = "0.1.0"

from .config.settings import NormalizerSettings, load_settings
from .models.envelope import HttpResponse, ResponseEnvelope, ResponseOutput
from .models.generation import (
    BedrockCommand,
    GenerationResponse,
    ModelFamily,
    NormalizedFields,
)
from .providers.base import ProviderError, ResponseDecodeError, UnknownModelFamilyError
from .providers.bedrock.response import BedrockResponse, resolve_model_family

__all__ = [
    # Normalizer
    "BedrockResponse",
    "resolve_model_family",
    
    # Models
    "ModelFamily",
    "BedrockCommand",
    "NormalizedFields",
    "GenerationResponse",
    "HttpResponse",
    "ResponseOutput",
    "ResponseEnvelope",
    
    # Configuration
    "NormalizerSettings",
    "load_settings",
    
    # Errors
    "ProviderError",
    "ResponseDecodeError",
    "UnknownModelFamilyError",
]
