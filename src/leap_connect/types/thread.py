from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common import dataclass_payload


@dataclass(frozen=True)
class ThreadMessage:
    content: str
    role: str = "user"
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None


@dataclass(frozen=True)
class CreateThreadRequest:
    messages: list[ThreadMessage] | None = None
    metadata: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class ModifyThreadRequest:
    metadata: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class Thread:
    id: str
    created_at: int
    object: str = "thread"
    metadata: dict[str, str] | None = None
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Thread":
        return cls(
            id=data["id"],
            created_at=int(data.get("created_at", 0)),
            object=data.get("object", "thread"),
            metadata=data.get("metadata"),
        )
