"""Observability helpers for the Bedrock response SDK."""

from .logging import ProviderLogger

__all__ = ["ProviderLogger"]
