"""Runtime settings for the response normalizer."""

import os
import logging

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .constants import (
    INPUT_TOKEN_COUNT_HEADER,
    OUTPUT_TOKEN_COUNT_HEADER,
    STRICT_FAMILY_ENV_VAR,
    TRUTHY_ENV_VALUES,
)

logger = logging.getLogger(__name__)


class NormalizerSettings(BaseModel):
    """Settings controlling how responses are normalized."""
    strict_family: bool = Field(
        default=False,
        description="Raise instead of returning empty results when no model family matches"
    )
    input_token_header: str = Field(
        default=INPUT_TOKEN_COUNT_HEADER,
        description="Header carrying the prompt token count"
    )
    output_token_header: str = Field(
        default=OUTPUT_TOKEN_COUNT_HEADER,
        description="Header carrying the completion token count"
    )

    model_config = {"frozen": True}


def load_settings() -> NormalizerSettings:
    """
    Load settings from the environment (and a local .env file if present).
    
    Recognized variables:
    - BEDROCK_RESPONSE_STRICT_FAMILY: "true", "1" or "yes" enables strict mode
    
    Returns:
        NormalizerSettings populated from the environment
    """
    load_dotenv()

    strict = os.getenv(STRICT_FAMILY_ENV_VAR, "false").strip().lower() in TRUTHY_ENV_VALUES
    if strict:
        logger.debug(f"{STRICT_FAMILY_ENV_VAR} set, unknown model families will raise")

    return NormalizerSettings(strict_family=strict)
