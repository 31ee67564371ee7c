from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class DeletionStatus:
    id: str
    object: str
    deleted: bool
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DeletionStatus":
        return cls(
            id=data["id"],
            object=data.get("object", ""),
            deleted=bool(data.get("deleted", False)),
        )


@dataclass(frozen=True)
class ListPage(Generic[T]):
    """Cursor-paginated ``{"object": "list", "data": [...]}`` envelope."""

    data: list[T]
    object: str = "list"
    first_id: str | None = None
    last_id: str | None = None
    has_more: bool = False
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], item: Callable[[dict[str, Any]], T]
    ) -> "ListPage[T]":
        return cls(
            data=[item(entry) for entry in data["data"]],
            object=data.get("object", "list"),
            first_id=data.get("first_id"),
            last_id=data.get("last_id"),
            has_more=bool(data.get("has_more", False)),
        )

    def __iter__(self):
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)
