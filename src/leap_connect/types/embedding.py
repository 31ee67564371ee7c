from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from ..common import Usage, dataclass_payload, optional_usage


@dataclass(frozen=True)
class EmbeddingRequest:
    model: str
    input: str | list[str]
    encoding_format: Literal["float", "base64"] | None = None
    # Only honoured by models that support shortened embeddings
    dimensions: int | None = None
    user: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class EmbeddingData:
    embedding: list[float]
    index: int
    object: str = "embedding"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmbeddingData":
        return cls(
            embedding=[float(x) for x in data["embedding"]],
            index=int(data.get("index", 0)),
            object=data.get("object", "embedding"),
        )


@dataclass(frozen=True)
class EmbeddingResponse:
    data: list[EmbeddingData]
    model: str
    object: str = "list"
    usage: Usage | None = None
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmbeddingResponse":
        return cls(
            data=[EmbeddingData.from_dict(item) for item in data["data"]],
            model=data.get("model", ""),
            object=data.get("object", "list"),
            usage=optional_usage(data.get("usage")),
        )

    def vectors(self) -> list[list[float]]:
        """Embeddings ordered by their ``index``."""
        return [item.embedding for item in sorted(self.data, key=lambda d: d.index)]
