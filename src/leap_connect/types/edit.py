from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common import Usage, dataclass_payload, optional_usage


@dataclass(frozen=True)
class EditRequest:
    model: str
    instruction: str
    input: str | None = None
    n: int | None = None
    temperature: float | None = None
    top_p: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class EditChoice:
    text: str
    index: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EditChoice":
        return cls(text=data["text"], index=int(data.get("index", 0)))


@dataclass(frozen=True)
class EditResponse:
    object: str
    created: int
    choices: list[EditChoice]
    usage: Usage | None = None
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EditResponse":
        return cls(
            object=data.get("object", "edit"),
            created=int(data.get("created", 0)),
            choices=[EditChoice.from_dict(c) for c in data["choices"]],
            usage=optional_usage(data.get("usage")),
        )
