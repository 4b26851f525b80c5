"""Pydantic schemas for student records."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field


class StudentStatus(str, Enum):
    """Enrollment lifecycle state of a student."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    GRADUATED = "graduated"


class Grade(str, Enum):
    """Closed set of letter grades."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


STATUS_FILTER_ALL = "all"
REQUIRED_TEXT_FIELDS: tuple[str, ...] = ("name", "email", "course")


def _check_email_syntax(value: str) -> str:
    """Reject malformed addresses while keeping the text as entered."""

    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from exc
    return value


EnteredEmail = Annotated[str, AfterValidator(_check_email_syntax)]


class StudentDraft(BaseModel):
    """Unsaved copy of a student used while a create/edit form is open."""

    name: str = ""
    email: str = ""
    age: int = 18
    grade: Grade = Grade.A
    course: str = ""
    enrollment_date: date = Field(default_factory=date.today)
    status: StudentStatus = StudentStatus.ACTIVE
    notes: str = ""

    def missing_required_fields(self) -> list[str]:
        """Return the required text fields that are blank."""

        return [
            field
            for field in REQUIRED_TEXT_FIELDS
            if not getattr(self, field).strip()
        ]


class Student(BaseModel):
    """Public, immutable student representation."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: EnteredEmail
    age: int
    grade: Grade
    course: str = Field(min_length=1)
    enrollment_date: date
    status: StudentStatus
    notes: str = ""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_draft(cls, student_id: str, draft: StudentDraft) -> "Student":
        """Build a student from ``draft`` under ``student_id``."""

        return cls(id=student_id, **draft.model_dump())

    def to_draft(self) -> StudentDraft:
        """Return an editable copy of this record without its id."""

        return StudentDraft(**self.model_dump(exclude={"id"}))


class RosterStats(BaseModel):
    """Aggregate counts recomputed from the live roster."""

    total: int
    active: int
    grade_a: int


__all__ = [
    "Grade",
    "REQUIRED_TEXT_FIELDS",
    "RosterStats",
    "STATUS_FILTER_ALL",
    "Student",
    "StudentDraft",
    "StudentStatus",
]
