"""Filtering helpers."""

from __future__ import annotations

from collections.abc import Iterable

from roster.backend.src.schemas.student import (
    STATUS_FILTER_ALL,
    Grade,
    RosterStats,
    Student,
    StudentStatus,
)

SEARCH_FIELDS: tuple[str, ...] = ("name", "email", "course")


def matches_search(student: Student, search_term: str) -> bool:
    """Return True when the term is a case-insensitive substring of a searchable field."""

    needle = search_term.lower()
    return any(needle in str(getattr(student, field)).lower() for field in SEARCH_FIELDS)


def matches_status(student: Student, status_filter: str) -> bool:
    """Return True when the status filter is ``all`` or equals the student's status."""

    return status_filter == STATUS_FILTER_ALL or student.status == status_filter


def filter_students(
    students: Iterable[Student],
    search_term: str = "",
    status_filter: str = STATUS_FILTER_ALL,
) -> list[Student]:
    """Return the students matching both the search term and the status filter."""

    return [
        student
        for student in students
        if matches_search(student, search_term) and matches_status(student, status_filter)
    ]


def compute_stats(students: Iterable[Student]) -> RosterStats:
    """Count total, active and A-grade students."""

    total = active = grade_a = 0
    for student in students:
        total += 1
        if student.status == StudentStatus.ACTIVE:
            active += 1
        if student.grade == Grade.A:
            grade_a += 1
    return RosterStats(total=total, active=active, grade_a=grade_a)


__all__ = ["compute_stats", "filter_students", "matches_search", "matches_status"]
