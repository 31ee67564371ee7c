"""
Chat Completion Example
=======================

PURPOSE:
    Send one chat completion request and print the reply.

REQUIRED ENVIRONMENT VARIABLES:
    TUPLELEAP_AI_API_KEY    Your API key

OPTIONAL ENVIRONMENT VARIABLES:
    API_URL_V1              Endpoint URL (default: http://0.0.0.0:1234/v1)

HOW TO RUN:
    TUPLELEAP_AI_API_KEY=sk-xxx uv run python examples/chat_completion.py
"""

import logging
import os

from leap_connect import ChatCompletionMessage, ChatCompletionRequest, Client
from leap_connect.common import MISTRAL


def main() -> None:
    if os.getenv("DEBUG"):
        logging.basicConfig(level=logging.DEBUG)

    req = ChatCompletionRequest(
        model=MISTRAL,
        messages=[ChatCompletionMessage.user("What is bitcoin?")],
    )
    with Client.from_env() as client:
        result = client.chat_completion(req)

    print(result.text)
    if result.usage:
        print("Tokens:", result.usage.total_tokens)


if __name__ == "__main__":
    main()
