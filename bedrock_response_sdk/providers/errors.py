"""
Error mapping utilities for response normalization.

Converts low-level decode failures and unmatched model families into
standardized ProviderError instances.
"""

import json
from typing import Any, Dict, Optional

from .base import ProviderError, ResponseDecodeError, UnknownModelFamilyError
from ..config.constants import PROVIDER_NAME


class ErrorMapper:
    """Maps normalization failures to standardized ProviderError."""
    
    @staticmethod
    def map_decode_error(
        error: Exception,
        status_code: Optional[int] = None,
        request_id: Optional[str] = None
    ) -> ResponseDecodeError:
        """
        Map a UTF-8 or JSON decode failure to ResponseDecodeError.
        
        Args:
            error: The UnicodeDecodeError or json.JSONDecodeError
            status_code: HTTP status code of the response, if known
            request_id: Request id of the response, if known
            
        Returns:
            ResponseDecodeError with the original error attached
        """
        if isinstance(error, UnicodeDecodeError):
            message = f"Bedrock response body is not valid UTF-8: {error.reason} at byte {error.start}"
        elif isinstance(error, json.JSONDecodeError):
            message = f"Bedrock response body is not valid JSON: {error.msg} at position {error.pos}"
        else:
            message = f"Bedrock response body could not be decoded: {str(error)}"

        if request_id:
            message = f"{message} (request_id={request_id})"

        decode_error = ResponseDecodeError(
            message=message,
            provider=PROVIDER_NAME,
            status_code=status_code
        )
        decode_error.original_error = error
        return decode_error

    @staticmethod
    def map_unknown_family(command: Any, request_id: Optional[str] = None) -> UnknownModelFamilyError:
        """Build the error raised when no model family matches a command."""
        message = f"No known model family matches command {command!r}"
        if request_id:
            message = f"{message} (request_id={request_id})"
        return UnknownModelFamilyError(message=message, provider=PROVIDER_NAME)

    @staticmethod
    def get_error_classification(error: ProviderError) -> Dict[str, Any]:
        """
        Get error details for logging.
        
        Args:
            error: The ProviderError to classify
            
        Returns:
            Dict with error classification details
        """
        original = getattr(error, 'original_error', None)
        return {
            'status_code': error.status_code,
            'error_type': type(original).__name__ if original is not None else type(error).__name__,
            'category': ErrorMapper._categorize_error(error)
        }

    @staticmethod
    def _categorize_error(error: ProviderError) -> str:
        """Categorize error for logging."""
        if isinstance(error, ResponseDecodeError):
            return 'decode'
        if isinstance(error, UnknownModelFamilyError):
            return 'validation'
        return 'unknown'
