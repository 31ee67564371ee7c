from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from ..common import dataclass_payload
from .chat_completion import Function

AssistantToolType = Literal["code_interpreter", "retrieval", "function"]


@dataclass(frozen=True)
class AssistantTool:
    type: AssistantToolType
    function: Function | None = None

    @classmethod
    def code_interpreter(cls) -> "AssistantTool":
        return cls(type="code_interpreter")

    @classmethod
    def retrieval(cls) -> "AssistantTool":
        return cls(type="retrieval")

    @classmethod
    def from_function(cls, function: Function) -> "AssistantTool":
        return cls(type="function", function=function)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AssistantTool":
        function = data.get("function")
        return cls(
            type=data["type"],
            function=Function.from_dict(function) if function else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


def parse_tools(raw: list[dict[str, Any]] | None) -> list[AssistantTool]:
    return [AssistantTool.from_dict(item) for item in raw or []]


@dataclass(frozen=True)
class AssistantRequest:
    """Body for both creating and modifying an assistant."""

    model: str
    name: str | None = None
    description: str | None = None
    instructions: str | None = None
    tools: list[AssistantTool] | None = None
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class Assistant:
    id: str
    created_at: int
    model: str
    object: str = "assistant"
    name: str | None = None
    description: str | None = None
    instructions: str | None = None
    tools: list[AssistantTool] | None = None
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Assistant":
        return cls(
            id=data["id"],
            created_at=int(data.get("created_at", 0)),
            model=data.get("model", ""),
            object=data.get("object", "assistant"),
            name=data.get("name"),
            description=data.get("description"),
            instructions=data.get("instructions"),
            tools=parse_tools(data.get("tools")),
            file_ids=data.get("file_ids"),
            metadata=data.get("metadata"),
        )


@dataclass(frozen=True)
class AssistantFileRequest:
    file_id: str

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class AssistantFile:
    id: str
    created_at: int
    assistant_id: str
    object: str = "assistant.file"
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AssistantFile":
        return cls(
            id=data["id"],
            created_at=int(data.get("created_at", 0)),
            assistant_id=data.get("assistant_id", ""),
            object=data.get("object", "assistant.file"),
        )
