"""Lifecycle management for the single in-progress create/edit form."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any

import structlog
from fastapi import HTTPException, status

from roster.backend.src.schemas.form import (
    AgeHint,
    FieldUpdateResult,
    FormMode,
    FormState,
)
from roster.backend.src.schemas.student import (
    Grade,
    Student,
    StudentDraft,
    StudentStatus,
)
from roster.backend.src.services.metrics import roster_form_rejections_total
from roster.backend.src.services.roster import RosterStore

LOGGER = structlog.get_logger(__name__)

DEFAULT_AGE = 18


def _parse_text(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError("Value must be text.")
    return value


def _parse_age(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("Age must be a whole number.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError("Age must be a whole number.")


def _parse_grade(value: Any) -> Grade:
    if isinstance(value, Grade):
        return value
    try:
        return Grade(str(value).strip().upper())
    except ValueError:
        allowed = ", ".join(grade.value for grade in Grade)
        raise ValueError(f"Grade must be one of {allowed}.") from None


def _parse_status(value: Any) -> StudentStatus:
    if isinstance(value, StudentStatus):
        return value
    try:
        return StudentStatus(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(item.value for item in StudentStatus)
        raise ValueError(f"Status must be one of {allowed}.") from None


def _parse_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise ValueError("Enrollment date must be an ISO date (YYYY-MM-DD).")


FIELD_PARSERS: dict[str, Callable[[Any], Any]] = {
    "name": _parse_text,
    "email": _parse_text,
    "course": _parse_text,
    "notes": _parse_text,
    "age": _parse_age,
    "grade": _parse_grade,
    "status": _parse_status,
    "enrollment_date": _parse_date,
}


class FormDraftController:
    """Drive the idle -> creating/editing -> idle form lifecycle."""

    def __init__(
        self,
        store: RosterStore,
        *,
        default_age: int = DEFAULT_AGE,
        age_hint: tuple[int, int] = (16, 100),
    ) -> None:
        self._store = store
        self._default_age = default_age
        self._age_hint = AgeHint(min=age_hint[0], max=age_hint[1])
        self.mode = FormMode.IDLE
        self.editing_id: str | None = None
        self.draft = self._default_draft()

    @property
    def visible(self) -> bool:
        return self.mode is not FormMode.IDLE

    def state(self) -> FormState:
        """Return a snapshot of the form for controlled-input binding."""

        return FormState(
            visible=self.visible,
            mode=self.mode,
            editing_id=self.editing_id,
            draft=self.draft.model_copy(),
            age_hint=self._age_hint,
        )

    def begin_create(self) -> None:
        self._reset(FormMode.CREATING)

    def begin_edit(self, student: Student) -> None:
        """Load ``student`` into the draft and remember its id."""

        self.draft = student.to_draft()
        self.editing_id = student.id
        self.mode = FormMode.EDITING

    def toggle(self) -> None:
        """Open a blank create form, or close whichever form is open."""

        if self.visible:
            self.cancel()
        else:
            self.begin_create()

    def cancel(self) -> None:
        self._reset(FormMode.IDLE)

    def update_field(self, field: str, value: Any) -> FieldUpdateResult:
        """Merge a single parsed field value into the draft."""

        if not self.visible:
            return self._reject(field, "No form is open.", reason="form_closed")

        parser = FIELD_PARSERS.get(field)
        if parser is None:
            return self._reject(field, f"Unknown field: {field}.", reason="unknown_field")

        try:
            parsed = parser(value)
        except ValueError as exc:
            return self._reject(field, str(exc), reason="invalid_value")

        self.draft = self.draft.model_copy(update={field: parsed})
        return FieldUpdateResult.ok(field)

    def submit(self) -> Student:
        """Save the draft through the store and return to idle.

        Raises a 409 error when no form is open and a 422 error when a required
        field is blank; in both cases the draft is kept for correction.
        """

        if not self.visible:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="No form is open",
            )

        missing = self.draft.missing_required_fields()
        if missing:
            roster_form_rejections_total.labels(reason="missing_required").inc()
            LOGGER.info("form_submit_rejected", missing=missing, mode=self.mode.value)
            raise HTTPException(
                status_code=422,
                detail=[
                    {"field": field, "message": "This field is required."}
                    for field in missing
                ],
            )

        if self.editing_id is not None:
            student = self._store.update(self.editing_id, self.draft)
        else:
            student = self._store.create(self.draft)

        self.cancel()
        return student

    def _default_draft(self) -> StudentDraft:
        return StudentDraft(age=self._default_age, enrollment_date=date.today())

    def _reset(self, mode: FormMode) -> None:
        self.draft = self._default_draft()
        self.editing_id = None
        self.mode = mode

    def _reject(self, field: str, error: str, *, reason: str) -> FieldUpdateResult:
        roster_form_rejections_total.labels(reason=reason).inc()
        LOGGER.info("form_field_rejected", field=field, error=error)
        return FieldUpdateResult.rejected(field, error)


__all__ = ["FIELD_PARSERS", "FormDraftController"]
