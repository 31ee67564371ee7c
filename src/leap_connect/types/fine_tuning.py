from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common import dataclass_payload


@dataclass(frozen=True)
class Hyperparameters:
    # Each accepts an explicit value or "auto"
    batch_size: int | str | None = None
    learning_rate_multiplier: float | str | None = None
    n_epochs: int | str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Hyperparameters":
        return cls(
            batch_size=data.get("batch_size"),
            learning_rate_multiplier=data.get("learning_rate_multiplier"),
            n_epochs=data.get("n_epochs"),
        )


@dataclass(frozen=True)
class CreateFineTuningJobRequest:
    model: str
    training_file: str
    hyperparameters: Hyperparameters | None = None
    suffix: str | None = None
    validation_file: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclass_payload(self)


@dataclass(frozen=True)
class FineTuningJobError:
    code: str
    message: str
    param: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FineTuningJobError":
        return cls(
            code=data.get("code", ""),
            message=data.get("message", ""),
            param=data.get("param"),
        )


@dataclass(frozen=True)
class FineTuningJob:
    id: str
    model: str
    status: str
    created_at: int
    training_file: str
    object: str = "fine_tuning.job"
    fine_tuned_model: str | None = None
    finished_at: int | None = None
    hyperparameters: Hyperparameters | None = None
    organization_id: str | None = None
    result_files: list[str] | None = None
    trained_tokens: int | None = None
    validation_file: str | None = None
    error: FineTuningJobError | None = None
    headers: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FineTuningJob":
        hyper = data.get("hyperparameters")
        error = data.get("error")
        return cls(
            id=data["id"],
            model=data.get("model", ""),
            status=data.get("status", ""),
            created_at=int(data.get("created_at", 0)),
            training_file=data.get("training_file", ""),
            object=data.get("object", "fine_tuning.job"),
            fine_tuned_model=data.get("fine_tuned_model"),
            finished_at=data.get("finished_at"),
            hyperparameters=Hyperparameters.from_dict(hyper) if hyper else None,
            organization_id=data.get("organization_id"),
            result_files=data.get("result_files"),
            trained_tokens=data.get("trained_tokens"),
            validation_file=data.get("validation_file"),
            # The API reports "no error" as null or as an empty object
            error=FineTuningJobError.from_dict(error) if error else None,
        )


@dataclass(frozen=True)
class FineTuningJobEvent:
    id: str
    created_at: int
    level: str
    message: str
    object: str = "fine_tuning.job.event"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FineTuningJobEvent":
        return cls(
            id=data["id"],
            created_at=int(data.get("created_at", 0)),
            level=data.get("level", ""),
            message=data.get("message", ""),
            object=data.get("object", "fine_tuning.job.event"),
        )
