"""
Bedrock response normalizer.

Bedrock's InvokeModel API returns a differently shaped JSON body for every
model family it serves, wrapped in a byte payload. BedrockResponse decodes
that payload once and exposes a fixed set of fields regardless of which
family produced it.
"""

import json
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from .parsers import PARSERS
from ..errors import ErrorMapper
from ...config.constants import PROVIDER_NAME
from ...config.settings import NormalizerSettings
from ...core.normalization.body import decode_body
from ...core.normalization.usage import normalize_usage, token_count_from_headers
from ...models.envelope import ResponseEnvelope
from ...models.generation import GenerationResponse, ModelFamily, NormalizedFields
from ...observability.logging import ProviderLogger

logger = ProviderLogger(PROVIDER_NAME)

FamilyLike = Union[ModelFamily, str, Any]


def resolve_model_family(command: FamilyLike) -> Optional[ModelFamily]:
    """
    Resolve a family from a ModelFamily, a family name, or a command classifier.
    
    Raises:
        UnknownModelFamilyError: If a family name is given that is not recognized
    """
    if isinstance(command, ModelFamily):
        return command
    if isinstance(command, str):
        try:
            return ModelFamily(command.strip().lower())
        except ValueError:
            raise ErrorMapper.map_unknown_family(command) from None
    return ModelFamily.from_command(command)


class BedrockResponse:
    """
    Normalized view of a single Bedrock InvokeModel response.
    
    The payload is decoded and the family-specific fields are extracted
    once, at construction. Every accessor afterwards is a plain read.
    
    Args:
        response: A ResponseEnvelope, or the raw middleware result dict
        bedrock_command: The model family, its name, or a classifier exposing
            is_ai21/is_claude/is_cohere/is_titan predicates
        settings: Optional NormalizerSettings (defaults are used otherwise)
        
    Raises:
        ResponseDecodeError: If the payload is not UTF-8 encoded JSON
        UnknownModelFamilyError: If no family matches and strict_family is set
    """
    
    def __init__(
        self,
        response: Union[ResponseEnvelope, Mapping[str, Any]],
        bedrock_command: FamilyLike,
        settings: Optional[NormalizerSettings] = None
    ):
        if not isinstance(response, ResponseEnvelope):
            response = ResponseEnvelope.from_middleware(response)
        
        self._envelope = response
        self._headers = MappingProxyType(dict(response.response.headers))
        self._settings = settings or NormalizerSettings()
        self._family = resolve_model_family(bedrock_command)
        
        request_id = self._envelope.output.request_id
        try:
            body = decode_body(self._envelope.output.body)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            error = ErrorMapper.map_decode_error(
                e,
                status_code=self._envelope.response.status_code,
                request_id=request_id
            )
            logger.error(
                "Failed to decode response body",
                family=self._family.value if self._family else None,
                request_id=request_id,
                error=e,
                **ErrorMapper.get_error_classification(error)
            )
            raise error from e
        
        if self._family is None:
            if self._settings.strict_family:
                error = ErrorMapper.map_unknown_family(bedrock_command, request_id=request_id)
                logger.error(
                    "No model family matched response",
                    request_id=request_id,
                    **ErrorMapper.get_error_classification(error)
                )
                raise error
            logger.warning(
                "No model family matched response, returning empty completions",
                request_id=request_id
            )
            self._fields = NormalizedFields()
        else:
            self._fields = PARSERS[self._family](body)
        
        logger.debug(
            "Normalized response",
            family=self._family.value if self._family else None,
            request_id=request_id,
            completions=len(self._fields.completions),
            finish_reason=self._fields.finish_reason
        )
    
    @property
    def model_family(self) -> Optional[ModelFamily]:
        """The family the response was parsed as, or None if none matched."""
        return self._family
    
    @property
    def completions(self) -> List[str]:
        """
        The prompt responses returned by the model.
        
        Returns:
            A new list of completion strings on every call, possibly empty
        """
        return list(self._fields.completions)
    
    @property
    def finish_reason(self) -> Optional[str]:
        """The reason the model has given for finishing the response."""
        return self._fields.finish_reason
    
    @property
    def headers(self) -> Mapping[str, Any]:
        """HTTP headers provided in the API response, as a read-only mapping."""
        return self._headers
    
    @property
    def id(self) -> Optional[str]:
        """Response identifier, provided only by AI21 and Cohere models."""
        return self._fields.id
    
    @property
    def input_token_count(self) -> int:
        """The number of tokens in the prompt as counted by the remote API."""
        return token_count_from_headers(self._headers, self._settings.input_token_header)
    
    @property
    def output_token_count(self) -> int:
        """The number of tokens in the LLM response as counted by the remote API."""
        return token_count_from_headers(self._headers, self._settings.output_token_header)
    
    @property
    def request_id(self) -> Optional[str]:
        """UUID assigned to the initial request as returned by the API."""
        return self._envelope.output.request_id
    
    @property
    def status_code(self) -> Optional[int]:
        """The HTTP status code of the response."""
        return self._envelope.response.status_code
    
    @property
    def status_reason(self) -> Optional[str]:
        return self._envelope.response.reason
    
    @property
    def text(self) -> str:
        """All completions concatenated."""
        return "".join(self._fields.completions)
    
    @property
    def usage(self) -> Dict[str, Any]:
        """Token usage in the standard SDK shape."""
        return normalize_usage(
            prompt_tokens=self.input_token_count,
            completion_tokens=self.output_token_count
        )
    
    # camelCase aliases matching the field names used across the agent ecosystem
    finishReason = finish_reason
    inputTokenCount = input_token_count
    outputTokenCount = output_token_count
    requestId = request_id
    statusCode = status_code
    
    def to_generation_response(self, model: str) -> GenerationResponse:
        """
        Convert to a GenerationResponse.
        
        Args:
            model: Model id the request was sent to
            
        Returns:
            GenerationResponse with text, usage and finish reason filled in
        """
        usage = self.usage
        logger.log_usage(
            usage,
            family=self._family.value if self._family else None,
            request_id=self.request_id
        )
        return GenerationResponse(
            text=self.text,
            model=model,
            usage=usage,
            provider=PROVIDER_NAME,
            finish_reason=self.finish_reason,
            completions=self._fields.completions,
            id=self.id,
            request_id=self.request_id
        )
    
    def __repr__(self) -> str:
        family = self._family.value if self._family else None
        return (
            f"BedrockResponse(family={family!r}, request_id={self.request_id!r}, "
            f"status_code={self.status_code!r})"
        )
