from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..common import dataclass_payload


@dataclass(frozen=True)
class CreateMessageRequest:
    content: str
    role: str = "user"
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class ModifyMessageRequest:
    metadata: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class MessageText:
    value: str
    annotations: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class MessageContent:
    type: str
    text: MessageText | None = None
    image_file: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MessageContent":
        text = data.get("text")
        return cls(
            type=data["type"],
            text=(
                MessageText(value=text.get("value", ""), annotations=text.get("annotations") or [])
                if text
                else None
            ),
            image_file=data.get("image_file"),
        )


@dataclass(frozen=True)
class Message:
    id: str
    created_at: int
    thread_id: str
    role: str
    content: list[MessageContent]
    object: str = "thread.message"
    assistant_id: str | None = None
    run_id: str | None = None
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Message":
        return cls(
            id=data["id"],
            created_at=int(data.get("created_at", 0)),
            thread_id=data.get("thread_id", ""),
            role=data.get("role", ""),
            content=[MessageContent.from_dict(part) for part in data.get("content") or []],
            object=data.get("object", "thread.message"),
            assistant_id=data.get("assistant_id"),
            run_id=data.get("run_id"),
            file_ids=data.get("file_ids"),
            metadata=data.get("metadata"),
        )

    @property
    def text(self) -> str:
        """Concatenated text parts, ignoring images."""
        return "".join(part.text.value for part in self.content if part.text)


@dataclass(frozen=True)
class MessageFile:
    id: str
    created_at: int
    message_id: str
    object: str = "thread.message.file"
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MessageFile":
        return cls(
            id=data["id"],
            created_at=int(data.get("created_at", 0)),
            message_id=data.get("message_id", ""),
            object=data.get("object", "thread.message.file"),
        )
