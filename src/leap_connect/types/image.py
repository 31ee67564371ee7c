from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from ..common import dataclass_payload, form_fields

ImageResponseFormat = Literal["url", "b64_json"]


@dataclass(frozen=True)
class ImageGenerationRequest:
    prompt: str
    model: str | None = None
    n: int | None = None
    quality: str | None = None
    response_format: ImageResponseFormat | None = None
    size: str | None = None
    style: str | None = None
    user: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class ImageEditRequest:
    """Sent as multipart form data; ``image`` and ``mask`` are local paths."""

    image: str | Path
    prompt: str
    mask: str | Path | None = None
    model: str | None = None
    n: int | None = None
    size: str | None = None
    response_format: ImageResponseFormat | None = None
    user: str | None = None

    def form(self) -> dict[str, str]:
        return form_fields(self, exclude=("image", "mask"))

    def uploads(self) -> dict[str, Path]:
        files = {"image": Path(self.image)}
        if self.mask is not None:
            files["mask"] = Path(self.mask)
        return files


@dataclass(frozen=True)
class ImageVariationRequest:
    image: str | Path
    model: str | None = None
    n: int | None = None
    response_format: ImageResponseFormat | None = None
    size: str | None = None
    user: str | None = None

    def form(self) -> dict[str, str]:
        return form_fields(self, exclude=("image",))

    def uploads(self) -> dict[str, Path]:
        return {"image": Path(self.image)}


@dataclass(frozen=True)
class ImageData:
    url: str | None = None
    b64_json: str | None = None
    revised_prompt: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImageData":
        return cls(
            url=data.get("url"),
            b64_json=data.get("b64_json"),
            revised_prompt=data.get("revised_prompt"),
        )


@dataclass(frozen=True)
class ImageResponse:
    created: int
    data: list[ImageData]
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImageResponse":
        return cls(
            created=int(data.get("created", 0)),
            data=[ImageData.from_dict(item) for item in data["data"]],
        )
