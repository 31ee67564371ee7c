"""Typed client for OpenAI-compatible chat-completion HTTP APIs."""

__version__ = "0.1.0"

from .client import Client
from .common import Usage
from .config import ClientConfig
from .errors import (
    APIConnectionError,
    APIError,
    APIStatusError,
    ConfigError,
    ResponseDecodeError,
)
from .streaming import ChatStream, iter_chunks, parse_chunk_line
from .types import (
    ChatChunkResponse,
    ChatCompletionMessage,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ContentPart,
    Function,
    FunctionParameters,
    JSONSchema,
    Tool,
)

__all__ = [
    "Client",
    "ClientConfig",
    "Usage",
    "APIError",
    "APIStatusError",
    "APIConnectionError",
    "ResponseDecodeError",
    "ConfigError",
    "ChatStream",
    "parse_chunk_line",
    "iter_chunks",
    "ChatChunkResponse",
    "ChatCompletionMessage",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ContentPart",
    "Function",
    "FunctionParameters",
    "JSONSchema",
    "Tool",
]
