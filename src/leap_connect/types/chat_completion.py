from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Literal

from ..common import Usage, dataclass_payload, optional_usage

MessageRole = Literal["system", "user", "assistant", "function", "tool"]
FinishReason = Literal["stop", "length", "content_filter", "tool_calls", "null"]
JSONSchemaType = Literal[
    "object", "number", "integer", "string", "array", "boolean", "null"
]


# ---------------------------------------------------------------------------
# Message content
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ImageUrl:
    url: str
    detail: str | None = None


@dataclass(frozen=True)
class ContentPart:
    """One element of a multi-part (vision) message body."""

    type: Literal["text", "image_url"]
    text: str | None = None
    image_url: ImageUrl | None = None

    @classmethod
    def from_text(cls, text: str) -> "ContentPart":
        return cls(type="text", text=text)

    @classmethod
    def from_image(cls, url: str, *, detail: str | None = None) -> "ContentPart":
        return cls(type="image_url", image_url=ImageUrl(url=url, detail=detail))


Content = str | list[ContentPart]


@dataclass(frozen=True)
class ToolCallFunction:
    name: str | None = None
    arguments: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ToolCallFunction":
        return cls(name=data.get("name"), arguments=data.get("arguments"))


@dataclass(frozen=True)
class ToolCall:
    function: ToolCallFunction
    id: str | None = None
    type: str = "function"
    # Only present on streamed deltas
    index: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ToolCall":
        return cls(
            function=ToolCallFunction.from_dict(data.get("function") or {}),
            id=data.get("id"),
            type=data.get("type") or "function",
            index=data.get("index"),
        )


def _tool_calls(raw: list[dict[str, Any]] | None) -> list[ToolCall] | None:
    if raw is None:
        return None
    return [ToolCall.from_dict(item) for item in raw]


@dataclass(frozen=True)
class ChatCompletionMessage:
    role: MessageRole
    content: Content
    name: str | None = None
    tool_calls: list[ToolCall] | None = None
    tool_call_id: str | None = None

    @classmethod
    def system(cls, text: str) -> "ChatCompletionMessage":
        return cls(role="system", content=text)

    @classmethod
    def user(cls, content: Content) -> "ChatCompletionMessage":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, text: str) -> "ChatCompletionMessage":
        return cls(role="assistant", content=text)

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@dataclass
class JSONSchema:
    type: JSONSchemaType | None = None
    description: str | None = None
    enum: list[str] | None = None
    properties: dict[str, JSONSchema] | None = None
    required: list[str] | None = None
    items: JSONSchema | None = None


@dataclass
class FunctionParameters:
    properties: dict[str, JSONSchema] | None = None
    required: list[str] | None = None
    type: JSONSchemaType = "object"


@dataclass
class Function:
    name: str
    description: str | None = None
    parameters: FunctionParameters = field(default_factory=FunctionParameters)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Function":
        params = data.get("parameters") or {}
        return cls(
            name=data["name"],
            description=data.get("description"),
            parameters=FunctionParameters(
                properties={
                    key: _schema_from_dict(value)
                    for key, value in (params.get("properties") or {}).items()
                }
                or None,
                required=params.get("required"),
                type=params.get("type", "object"),
            ),
        )


def _schema_from_dict(data: dict[str, Any]) -> JSONSchema:
    props = data.get("properties")
    items = data.get("items")
    return JSONSchema(
        type=data.get("type"),
        description=data.get("description"),
        enum=data.get("enum"),
        properties={k: _schema_from_dict(v) for k, v in props.items()} if props else None,
        required=data.get("required"),
        items=_schema_from_dict(items) if items else None,
    )


@dataclass
class Tool:
    function: Function
    type: Literal["function"] = "function"


def named_tool_choice(name: str) -> dict[str, Any]:
    """``tool_choice`` value that forces a call to the function ``name``."""
    return {"type": "function", "function": {"name": name}}


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChatCompletionRequest:
    model: str
    messages: list[ChatCompletionMessage]
    temperature: float | None = None
    top_p: float | None = None
    n: int | None = None
    response_format: dict[str, Any] | None = None
    stream: bool | None = None
    stop: list[str] | None = None
    max_tokens: int | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    logit_bias: dict[str, int] | None = None
    user: str | None = None
    seed: int | None = None
    tools: list[Tool] | None = None
    # "none", "auto" or named_tool_choice(...)
    tool_choice: str | dict[str, Any] | None = None

    def with_tools(self, tools: list[Tool]) -> "ChatCompletionRequest":
        return replace(self, tools=list(tools))

    def with_stream(self, stream: bool = True) -> "ChatCompletionRequest":
        return replace(self, stream=stream)

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChatCompletionMessageForResponse:
    role: MessageRole
    content: str | None = None
    name: str | None = None
    tool_calls: list[ToolCall] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChatCompletionMessageForResponse":
        return cls(
            role=data.get("role", "assistant"),
            content=data.get("content"),
            name=data.get("name"),
            tool_calls=_tool_calls(data.get("tool_calls")),
        )


@dataclass(frozen=True)
class ChatCompletionChoice:
    index: int
    message: ChatCompletionMessageForResponse
    finish_reason: FinishReason | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChatCompletionChoice":
        return cls(
            index=int(data.get("index", 0)),
            message=ChatCompletionMessageForResponse.from_dict(data["message"]),
            finish_reason=data.get("finish_reason"),
        )


@dataclass(frozen=True)
class ChatCompletionResponse:
    id: str
    object: str
    created: int
    model: str
    choices: list[ChatCompletionChoice]
    usage: Usage | None = None
    system_fingerprint: str | None = None
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChatCompletionResponse":
        return cls(
            id=data["id"],
            object=data.get("object", "chat.completion"),
            created=int(data.get("created", 0)),
            model=data.get("model", ""),
            choices=[ChatCompletionChoice.from_dict(c) for c in data["choices"]],
            usage=optional_usage(data.get("usage")),
            system_fingerprint=data.get("system_fingerprint"),
        )

    @property
    def text(self) -> str:
        """Content of the first choice, or an empty string."""
        if not self.choices:
            return ""
        return self.choices[0].message.content or ""


# ---------------------------------------------------------------------------
# Streaming chunks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChatChunkDelta:
    role: MessageRole | None = None
    content: str | None = None
    tool_calls: list[ToolCall] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChatChunkDelta":
        return cls(
            role=data.get("role"),
            content=data.get("content"),
            tool_calls=_tool_calls(data.get("tool_calls")),
        )


@dataclass(frozen=True)
class ChatChunkChoice:
    index: int
    delta: ChatChunkDelta
    finish_reason: FinishReason | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChatChunkChoice":
        return cls(
            index=int(data.get("index", 0)),
            delta=ChatChunkDelta.from_dict(data.get("delta") or {}),
            finish_reason=data.get("finish_reason"),
        )


@dataclass(frozen=True)
class ChatChunkResponse:
    id: str
    object: str
    created: int
    model: str
    choices: list[ChatChunkChoice]
    system_fingerprint: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChatChunkResponse":
        return cls(
            id=data["id"],
            object=data.get("object", "chat.completion.chunk"),
            created=int(data.get("created", 0)),
            model=data.get("model", ""),
            choices=[ChatChunkChoice.from_dict(c) for c in data["choices"]],
            system_fingerprint=data.get("system_fingerprint"),
        )

    @property
    def text(self) -> str:
        return "".join(choice.delta.content or "" for choice in self.choices)
