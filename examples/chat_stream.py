"""
Streaming Chat Example
======================

PURPOSE:
    Stream a chat completion and print each delta as it arrives.

HOW TO RUN:
    TUPLELEAP_AI_API_KEY=sk-xxx uv run python examples/chat_stream.py
"""

from leap_connect import ChatCompletionMessage, ChatCompletionRequest, Client
from leap_connect.common import MISTRAL


def main() -> None:
    req = ChatCompletionRequest(
        model=MISTRAL,
        messages=[ChatCompletionMessage.user("What is bitcoin?")],
    )
    with Client.from_env() as client, client.chat_completion_stream(req) as stream:
        for chunk in stream:
            print(chunk.text, end="", flush=True)
    print()


if __name__ == "__main__":
    main()
