from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..common import dataclass_payload, form_fields


@dataclass(frozen=True)
class AudioTranscriptionRequest:
    file: str | Path
    model: str
    prompt: str | None = None
    # "json", "text", "srt", "verbose_json" or "vtt"
    response_format: str | None = None
    temperature: float | None = None
    language: str | None = None

    def form(self) -> dict[str, str]:
        return form_fields(self, exclude=("file",))

    def uploads(self) -> dict[str, Path]:
        return {"file": Path(self.file)}


@dataclass(frozen=True)
class AudioTranslationRequest:
    file: str | Path
    model: str
    prompt: str | None = None
    response_format: str | None = None
    temperature: float | None = None

    def form(self) -> dict[str, str]:
        return form_fields(self, exclude=("file",))

    def uploads(self) -> dict[str, Path]:
        return {"file": Path(self.file)}


@dataclass(frozen=True)
class AudioTextResponse:
    """Transcription or translation result.

    Non-JSON response formats (``text``, ``srt``, ``vtt``) land in ``text``
    verbatim.
    """

    text: str
    language: str | None = None
    duration: float | None = None
    segments: list[dict[str, Any]] | None = None
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AudioTextResponse":
        duration = data.get("duration")
        return cls(
            text=data["text"],
            language=data.get("language"),
            duration=float(duration) if duration is not None else None,
            segments=data.get("segments"),
        )


@dataclass(frozen=True)
class AudioSpeechRequest:
    model: str
    input: str
    voice: str
    # Local file the synthesized audio is written to; never sent
    output: str | Path
    response_format: str | None = None
    speed: float | None = None

    def to_dict(self) -> dict[str, Any]:
        payload = dataclass_payload(self)
        payload.pop("output", None)
        return payload


@dataclass(frozen=True)
class AudioSpeechResponse:
    result: bool
    path: Path
    headers: dict[str, str] | None = None
