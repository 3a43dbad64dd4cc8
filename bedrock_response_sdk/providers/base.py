"""
Base Provider Errors

This module defines the exception hierarchy raised while normalizing
provider responses.
"""

from typing import Optional


class ProviderError(Exception):
    """
    Base exception for provider-related errors.
    
    Attributes:
        message: Error message
        provider: Provider name
        status_code: HTTP status code if applicable
        original_error: The original exception if wrapped
    """
    
    def __init__(
        self,
        message: str,
        provider: str,
        status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.status_code = status_code
        self.original_error = None  # Will be set by error mapper if wrapping


class ResponseDecodeError(ProviderError, ValueError):
    """
    Raised when a response payload is not UTF-8 encoded JSON.
    
    Subclasses ValueError so callers catching the standard decode errors
    (UnicodeDecodeError, json.JSONDecodeError) keep working.
    """


class UnknownModelFamilyError(ProviderError, ValueError):
    """Raised when a response cannot be attributed to a known model family."""
