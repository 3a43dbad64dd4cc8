"""
Structured logging utility for response normalization.

Provides a consistent logging interface with standard fields like provider,
model family and request_id.
"""

import logging
from typing import Any, Dict, Optional


class ProviderLogger:
    """Structured logger for provider response handling."""
    
    def __init__(self, provider_name: str):
        """
        Initialize logger for a specific provider.
        
        Args:
            provider_name: Name of the provider (e.g., "bedrock")
        """
        self.provider = provider_name
        self.logger = logging.getLogger(f"bedrock_response_sdk.providers.{provider_name}")
    
    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"provider={self.provider}"]
        
        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")
        
        return f"[{' '.join(fields)}] {message}"
    
    def debug(self, message: str, family: Optional[str] = None,
              request_id: Optional[str] = None, **kwargs):
        """Log debug message with structured fields."""
        self.logger.debug(
            self._format_message(message, family=family, request_id=request_id, **kwargs)
        )
    
    def warning(self, message: str, family: Optional[str] = None,
                request_id: Optional[str] = None, **kwargs):
        """Log warning message with structured fields."""
        self.logger.warning(
            self._format_message(message, family=family, request_id=request_id, **kwargs)
        )
    
    def error(self, message: str, family: Optional[str] = None,
              request_id: Optional[str] = None, error: Optional[Exception] = None, **kwargs):
        """Log error message with structured fields."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)
        
        self.logger.error(
            self._format_message(message, family=family, request_id=request_id, **kwargs)
        )
    
    def log_usage(self, usage: Dict[str, Any], family: Optional[str], request_id: Optional[str]):
        """Log token usage information."""
        self.debug(
            "Token usage",
            family=family,
            request_id=request_id,
            prompt_tokens=usage.get('prompt_tokens', 0),
            completion_tokens=usage.get('completion_tokens', 0),
            total_tokens=usage.get('total_tokens', 0)
        )
