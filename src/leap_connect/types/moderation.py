from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..common import dataclass_payload


@dataclass(frozen=True)
class CreateModerationRequest:
    input: str | list[str]
    model: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class ModerationResult:
    flagged: bool
    categories: dict[str, bool] = field(default_factory=dict)
    category_scores: dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ModerationResult":
        return cls(
            flagged=bool(data["flagged"]),
            categories={k: bool(v) for k, v in (data.get("categories") or {}).items()},
            category_scores={
                k: float(v) for k, v in (data.get("category_scores") or {}).items()
            },
        )

    def flagged_categories(self) -> list[str]:
        return sorted(name for name, hit in self.categories.items() if hit)


@dataclass(frozen=True)
class ModerationResponse:
    id: str
    model: str
    results: list[ModerationResult]
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ModerationResponse":
        return cls(
            id=data["id"],
            model=data.get("model", ""),
            results=[ModerationResult.from_dict(r) for r in data["results"]],
        )
