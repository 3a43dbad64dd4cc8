"""
Example: Normalizing Bedrock Responses

This example shows how one BedrockResponse interface covers the response
bodies of every supported model family.
"""

import json
import logging

from bedrock_response_sdk import BedrockResponse, ModelFamily, ResponseEnvelope, load_settings


SAMPLE_BODIES = {
    ModelFamily.AI21: {
        "id": 1234,
        "completions": [{"data": {"text": "Hello from Jurassic"}, "finishReason": {"reason": "endoftext"}}],
    },
    ModelFamily.CLAUDE: {"completion": " Hello from Claude", "stop_reason": "stop_sequence"},
    ModelFamily.COHERE: {
        "id": "6a9b5e4c",
        "generations": [{"text": "Hello from Command", "finish_reason": "COMPLETE"}],
    },
    ModelFamily.TITAN: {"results": [{"outputText": "Hello from Titan", "completionReason": "FINISH"}]},
}


def build_middleware_result(body: dict) -> dict:
    """Shape a body the way the AWS SDK middleware hands it over."""
    return {
        "response": {
            "headers": {
                "x-amzn-bedrock-input-token-count": "12",
                "x-amzn-bedrock-output-token-count": "5",
            },
            "statusCode": 200,
            "reason": "OK",
        },
        "output": {
            "$metadata": {"requestId": "eda0760a-c3f0-4fc1-9a1e-75559d642866"},
            "body": json.dumps(body).encode("utf-8"),
        },
    }


def main():
    logging.basicConfig(level=logging.DEBUG)
    settings = load_settings()

    for family, body in SAMPLE_BODIES.items():
        envelope = ResponseEnvelope.from_middleware(build_middleware_result(body))
        response = BedrockResponse(envelope, family, settings)

        print(f"=== {family.value} ===")
        print(f"  Completions:   {response.completions}")
        print(f"  Finish reason: {response.finish_reason}")
        print(f"  Id:            {response.id}")
        print(f"  Tokens:        {response.input_token_count} in / {response.output_token_count} out")
        print(f"  Request id:    {response.request_id}")
        print()


if __name__ == "__main__":
    main()
