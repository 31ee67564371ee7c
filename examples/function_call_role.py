"""
Tool Calling Example
====================

PURPOSE:
    Offer the model a function, run it locally when the model asks for it,
    and send the result back as a ``function`` role message.

EXECUTION FLOW:
    1. Ask "What is the price of Ethereum?" with a get_coin_price tool
    2. The model answers with finish_reason == "tool_calls"
    3. Each call's JSON arguments are decoded and the price is looked up
    4. A follow-up request carries the result; the final reply is printed

HOW TO RUN:
    TUPLELEAP_AI_API_KEY=sk-xxx uv run python examples/function_call_role.py
"""

import json

from leap_connect import (
    ChatCompletionMessage,
    ChatCompletionRequest,
    Client,
    Function,
    FunctionParameters,
    JSONSchema,
    Tool,
)
from leap_connect.common import MISTRAL

QUESTION = "What is the price of Ethereum?"


def get_coin_price(coin: str) -> float:
    coin = coin.lower()
    if coin in ("btc", "bitcoin"):
        return 10000.0
    if coin in ("eth", "ethereum"):
        return 1000.0
    return 0.0


COIN_TOOL = Tool(
    function=Function(
        name="get_coin_price",
        description="Get the price of a cryptocurrency",
        parameters=FunctionParameters(
            properties={
                "coin": JSONSchema(
                    type="string", description="The cryptocurrency to get the price of"
                )
            },
            required=["coin"],
        ),
    )
)


def main() -> None:
    req = ChatCompletionRequest(
        model=MISTRAL, messages=[ChatCompletionMessage.user(QUESTION)]
    ).with_tools([COIN_TOOL])

    with Client.from_env() as client:
        result = client.chat_completion(req)
        choice = result.choices[0]

        if choice.finish_reason != "tool_calls":
            print(choice.finish_reason, choice.message.content)
            return

        for tool_call in choice.message.tool_calls or []:
            coin = json.loads(tool_call.function.arguments or "{}")["coin"]
            price = get_coin_price(coin)
            print(f"coin: {coin}  price: {price}")

            follow_up = ChatCompletionRequest(
                model=MISTRAL,
                messages=[
                    ChatCompletionMessage.user(QUESTION),
                    ChatCompletionMessage(
                        role="function",
                        content=json.dumps({"price": price}),
                        name="get_coin_price",
                    ),
                ],
            )
            print(client.chat_completion(follow_up).text)


if __name__ == "__main__":
    main()
