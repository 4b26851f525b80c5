"""Utilities for seeding demo roster data."""

from __future__ import annotations

from datetime import date

from roster.backend.src.schemas.student import Grade, Student, StudentStatus

DEMO_STUDENTS: tuple[Student, ...] = (
    Student(
        id="1",
        name="Sarah Johnson",
        email="sarah.j@email.com",
        age=20,
        grade=Grade.A,
        course="Computer Science",
        enrollment_date=date(2023, 9, 1),
        status=StudentStatus.ACTIVE,
        notes="Excellent performance in programming courses",
    ),
    Student(
        id="2",
        name="Michael Chen",
        email="michael.c@email.com",
        age=22,
        grade=Grade.B,
        course="Engineering",
        enrollment_date=date(2022, 8, 15),
        status=StudentStatus.ACTIVE,
        notes="Strong in mathematics and physics",
    ),
    Student(
        id="3",
        name="Emily Rodriguez",
        email="emily.r@email.com",
        age=21,
        grade=Grade.A,
        course="Business Administration",
        enrollment_date=date(2023, 1, 10),
        status=StudentStatus.INACTIVE,
        notes="Currently on academic leave",
    ),
)


def demo_students(enabled: bool = True) -> tuple[Student, ...]:
    """Return the demo roster, or an empty roster when seeding is disabled."""

    return DEMO_STUDENTS if enabled else ()


__all__ = ["DEMO_STUDENTS", "demo_students"]
