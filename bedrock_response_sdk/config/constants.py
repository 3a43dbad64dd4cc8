"""
Bedrock Response Constants

Header names and environment variables used when normalizing responses
returned by the Bedrock runtime.
"""

# Token usage headers set by the Bedrock runtime on every InvokeModel response
INPUT_TOKEN_COUNT_HEADER = "x-amzn-bedrock-input-token-count"
OUTPUT_TOKEN_COUNT_HEADER = "x-amzn-bedrock-output-token-count"

# Request id header on the raw REST response
REQUEST_ID_HEADER = "x-amzn-requestid"

# Provider name reported on normalized responses
PROVIDER_NAME = "bedrock"

# Environment variable toggling fail-fast on unrecognized model families
STRICT_FAMILY_ENV_VAR = "BEDROCK_RESPONSE_STRICT_FAMILY"

TRUTHY_ENV_VALUES = ("true", "1", "yes")
