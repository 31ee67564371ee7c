from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common import Usage, dataclass_payload, optional_usage


@dataclass(frozen=True)
class CompletionRequest:
    model: str
    prompt: str | list[str]
    suffix: str | None = None
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    n: int | None = None
    logprobs: int | None = None
    echo: bool | None = None
    stop: list[str] | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    best_of: int | None = None
    logit_bias: dict[str, int] | None = None
    user: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class CompletionChoice:
    text: str
    index: int
    finish_reason: str | None = None
    logprobs: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CompletionChoice":
        return cls(
            text=data["text"],
            index=int(data.get("index", 0)),
            finish_reason=data.get("finish_reason"),
            logprobs=data.get("logprobs"),
        )


@dataclass(frozen=True)
class CompletionResponse:
    id: str
    object: str
    created: int
    model: str
    choices: list[CompletionChoice]
    usage: Usage | None = None
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CompletionResponse":
        return cls(
            id=data["id"],
            object=data.get("object", "text_completion"),
            created=int(data.get("created", 0)),
            model=data.get("model", ""),
            choices=[CompletionChoice.from_dict(c) for c in data["choices"]],
            usage=optional_usage(data.get("usage")),
        )
