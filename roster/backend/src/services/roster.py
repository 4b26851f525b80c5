"""In-memory roster store holding the authoritative list of students."""

from __future__ import annotations

from collections.abc import Iterable

import structlog
from fastapi import HTTPException, status
from pydantic import ValidationError

from roster.backend.src.schemas.student import Student, StudentDraft
from roster.backend.src.services.ids import IdGenerator, uuid_ids
from roster.backend.src.services.metrics import roster_mutations_total

LOGGER = structlog.get_logger(__name__)


def _validation_detail(exc: ValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into ``{"field", "message"}`` pairs."""

    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


def build_student(student_id: str, draft: StudentDraft) -> Student:
    """Validate ``draft`` into a :class:`Student` or raise a 422 error."""

    try:
        return Student.from_draft(student_id, draft)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=_validation_detail(exc),
        ) from exc


class RosterStore:
    """Ordered collection of students with atomic whole-collection swaps."""

    def __init__(
        self,
        students: Iterable[Student] = (),
        *,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._id_generator = id_generator or uuid_ids()
        self._students: tuple[Student, ...] = ()
        self.reset(students)

    def __len__(self) -> int:
        return len(self._students)

    def list(self) -> tuple[Student, ...]:
        """Return the roster in insertion order."""

        return self._students

    def get(self, student_id: str) -> Student:
        """Return the student with ``student_id`` or raise a 404 error."""

        return self._students[self._index_or_404(student_id)]

    def create(self, draft: StudentDraft) -> Student:
        """Append a new student built from ``draft`` and return it."""

        student = build_student(self._next_id(), draft)
        self._students = (*self._students, student)
        roster_mutations_total.labels(operation="create").inc()
        LOGGER.info("student_created", student_id=student.id, total=len(self._students))
        return student

    def update(self, student_id: str, draft: StudentDraft) -> Student:
        """Replace the fields of ``student_id`` with the draft, keeping id and position."""

        index = self._index_or_404(student_id)
        student = build_student(student_id, draft)
        self._students = (
            *self._students[:index],
            student,
            *self._students[index + 1 :],
        )
        roster_mutations_total.labels(operation="update").inc()
        LOGGER.info("student_updated", student_id=student_id)
        return student

    def delete(self, student_id: str, *, confirmed: bool) -> bool:
        """Remove ``student_id`` once the caller confirmed the deletion.

        Returns ``False`` without touching the roster when the deletion was
        not confirmed. Unknown ids raise a 404 error.
        """

        if not confirmed:
            LOGGER.info("student_delete_declined", student_id=student_id)
            return False

        index = self._index_or_404(student_id)
        self._students = self._students[:index] + self._students[index + 1 :]
        roster_mutations_total.labels(operation="delete").inc()
        LOGGER.info("student_deleted", student_id=student_id, total=len(self._students))
        return True

    def reset(self, students: Iterable[Student] = ()) -> None:
        """Replace the whole roster, rejecting duplicate ids."""

        replacement = tuple(students)
        ids = [student.id for student in replacement]
        if len(set(ids)) != len(ids):
            raise ValueError("Roster contains duplicate student ids")
        self._students = replacement

    def _index_or_404(self, student_id: str) -> int:
        for index, student in enumerate(self._students):
            if student.id == student_id:
                return index
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Student not found",
        )

    def _next_id(self) -> str:
        existing = {student.id for student in self._students}
        # A counter restarted below seeded ids needs at most len(existing) skips.
        for _ in range(len(existing) + 1):
            candidate = self._id_generator()
            if candidate and candidate not in existing:
                return candidate
        raise RuntimeError("Id generator produced only existing identifiers")


__all__ = ["RosterStore", "build_student"]
