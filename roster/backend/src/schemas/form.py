"""Form draft schemas."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel

from .student import StudentDraft


class FormMode(str, Enum):
    """Lifecycle state of the student form."""

    IDLE = "idle"
    CREATING = "creating"
    EDITING = "editing"


class AgeHint(BaseModel):
    """Suggested age bounds for numeric form inputs."""

    min: int
    max: int


class FormState(BaseModel):
    """Snapshot of the form used for controlled-input binding."""

    visible: bool
    mode: FormMode
    editing_id: str | None
    draft: StudentDraft
    age_hint: AgeHint


class FieldChange(BaseModel):
    """Payload for a single field edit emitted while typing."""

    field: str
    value: Any = None


class FieldUpdateResult(BaseModel):
    """Outcome of merging one field change into the draft."""

    field: str
    accepted: bool
    error: str | None = None

    @classmethod
    def ok(cls, field: str) -> "FieldUpdateResult":
        return cls(field=field, accepted=True)

    @classmethod
    def rejected(cls, field: str, error: str) -> "FieldUpdateResult":
        return cls(field=field, accepted=False, error=error)


__all__ = [
    "AgeHint",
    "FieldChange",
    "FieldUpdateResult",
    "FormMode",
    "FormState",
]
