from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class FileUploadRequest:
    file: str | Path
    purpose: str

    def form(self) -> dict[str, str]:
        return {"purpose": self.purpose}

    def uploads(self) -> dict[str, Path]:
        return {"file": Path(self.file)}


@dataclass(frozen=True)
class FileObject:
    id: str
    bytes: int
    created_at: int
    filename: str
    purpose: str
    object: str = "file"
    status: str | None = None
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FileObject":
        return cls(
            id=data["id"],
            bytes=int(data.get("bytes", 0) or 0),
            created_at=int(data.get("created_at", 0)),
            filename=data.get("filename", ""),
            purpose=data.get("purpose", ""),
            object=data.get("object", "file"),
            status=data.get("status"),
        )


@dataclass(frozen=True)
class FileListResponse:
    data: list[FileObject]
    object: str = "list"
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FileListResponse":
        return cls(
            data=[FileObject.from_dict(item) for item in data["data"]],
            object=data.get("object", "list"),
        )


@dataclass(frozen=True)
class FileContent:
    content: bytes
    headers: dict[str, str] | None = None

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")
