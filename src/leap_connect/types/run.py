from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common import Usage, dataclass_payload, optional_usage
from .assistant import AssistantTool, parse_tools
from .thread import CreateThreadRequest

# Statuses after which a run never changes again
TERMINAL_RUN_STATUSES = frozenset({"cancelled", "failed", "completed", "expired"})


@dataclass(frozen=True)
class CreateRunRequest:
    assistant_id: str
    model: str | None = None
    instructions: str | None = None
    additional_instructions: str | None = None
    tools: list[AssistantTool] | None = None
    metadata: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class ModifyRunRequest:
    metadata: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class CreateThreadAndRunRequest:
    assistant_id: str
    thread: CreateThreadRequest | None = None
    model: str | None = None
    instructions: str | None = None
    tools: list[AssistantTool] | None = None
    metadata: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class Run:
    id: str
    created_at: int
    thread_id: str
    assistant_id: str
    status: str
    object: str = "thread.run"
    required_action: dict[str, Any] | None = None
    last_error: dict[str, Any] | None = None
    expires_at: int | None = None
    started_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    model: str | None = None
    instructions: str | None = None
    tools: list[AssistantTool] | None = None
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None
    usage: Usage | None = None
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Run":
        return cls(
            id=data["id"],
            created_at=int(data.get("created_at", 0)),
            thread_id=data.get("thread_id", ""),
            assistant_id=data.get("assistant_id", ""),
            status=data["status"],
            object=data.get("object", "thread.run"),
            required_action=data.get("required_action"),
            last_error=data.get("last_error"),
            expires_at=data.get("expires_at"),
            started_at=data.get("started_at"),
            cancelled_at=data.get("cancelled_at"),
            failed_at=data.get("failed_at"),
            completed_at=data.get("completed_at"),
            model=data.get("model"),
            instructions=data.get("instructions"),
            tools=parse_tools(data.get("tools")),
            file_ids=data.get("file_ids"),
            metadata=data.get("metadata"),
            usage=optional_usage(data.get("usage")),
        )

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_RUN_STATUSES


@dataclass(frozen=True)
class RunStep:
    id: str
    created_at: int
    run_id: str
    thread_id: str
    assistant_id: str
    type: str
    status: str
    object: str = "thread.run.step"
    step_details: dict[str, Any] | None = None
    last_error: dict[str, Any] | None = None
    expired_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    metadata: dict[str, str] | None = None
    usage: Usage | None = None
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RunStep":
        return cls(
            id=data["id"],
            created_at=int(data.get("created_at", 0)),
            run_id=data.get("run_id", ""),
            thread_id=data.get("thread_id", ""),
            assistant_id=data.get("assistant_id", ""),
            type=data.get("type", ""),
            status=data.get("status", ""),
            object=data.get("object", "thread.run.step"),
            step_details=data.get("step_details"),
            last_error=data.get("last_error"),
            expired_at=data.get("expired_at"),
            cancelled_at=data.get("cancelled_at"),
            failed_at=data.get("failed_at"),
            completed_at=data.get("completed_at"),
            metadata=data.get("metadata"),
            usage=optional_usage(data.get("usage")),
        )
