from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
import json
from typing import Any

# Chat models
MISTRAL = "mistral"
GPT3_5_TURBO = "gpt-3.5-turbo"
GPT4 = "gpt-4"
GPT4_TURBO = "gpt-4-turbo"
GPT4_O = "gpt-4o"
GPT4_O_MINI = "gpt-4o-mini"

# Embedding models
TEXT_EMBEDDING_3_SMALL = "text-embedding-3-small"
TEXT_EMBEDDING_3_LARGE = "text-embedding-3-large"
TEXT_EMBEDDING_ADA_002 = "text-embedding-ada-002"

# Audio / image / moderation models
WHISPER_1 = "whisper-1"
TTS_1 = "tts-1"
TTS_1_HD = "tts-1-hd"
DALL_E_2 = "dall-e-2"
DALL_E_3 = "dall-e-3"
TEXT_MODERATION_LATEST = "text-moderation-latest"
TEXT_MODERATION_STABLE = "text-moderation-stable"


@dataclass(frozen=True)
class Usage:
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int

    @classmethod
    def from_dict(cls, data: dict[str, int]) -> "Usage":
        prompt = int(data.get("prompt_tokens", 0) or 0)
        completion = int(data.get("completion_tokens", 0) or 0)
        total = int(data.get("total_tokens", 0) or prompt + completion)
        return cls(prompt_tokens=prompt, completion_tokens=completion, total_tokens=total)

    def to_dict(self) -> dict[str, int]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }


def optional_usage(data: dict[str, Any] | None) -> Usage | None:
    return Usage.from_dict(data) if data else None


def to_wire(value: Any) -> Any:
    """Convert a request value into JSON-ready data, dropping ``None`` fields.

    Dataclasses are walked field by field (``headers`` is never sent), nested
    lists and dicts are converted recursively. Objects with their own
    ``to_dict`` take precedence so a type can customize its wire form.
    """
    if hasattr(value, "to_dict") and not isinstance(value, type):
        return value.to_dict()
    if is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_wire(getattr(value, f.name))
            for f in fields(value)
            if f.name != "headers" and getattr(value, f.name) is not None
        }
    if isinstance(value, dict):
        return {k: to_wire(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    return value


def dataclass_payload(obj: Any) -> dict[str, Any]:
    """Wire payload of a request dataclass, bypassing its own ``to_dict``."""
    return {
        f.name: to_wire(getattr(obj, f.name))
        for f in fields(obj)
        if f.name != "headers" and getattr(obj, f.name) is not None
    }


def form_fields(obj: Any, *, exclude: tuple[str, ...] = ()) -> dict[str, str]:
    """Multipart form values of a request dataclass.

    Strings are sent as-is; numbers and booleans use their JSON spelling.
    """
    out: dict[str, str] = {}
    for f in fields(obj):
        if f.name in exclude or f.name == "headers":
            continue
        value = getattr(obj, f.name)
        if value is None:
            continue
        out[f.name] = value if isinstance(value, str) else json.dumps(value)
    return out
