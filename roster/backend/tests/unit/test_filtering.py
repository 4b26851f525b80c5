from __future__ import annotations

import sys
from pathlib import Path

# Ensure repository root is on sys.path for imports
sys.path.append(str(Path(__file__).resolve().parents[4]))

from roster.backend.src.services.filtering import compute_stats, filter_students
from roster.backend.src.services.seed import DEMO_STUDENTS


def _names(students) -> list[str]:  # type: ignore[no-untyped-def]
    return [student.name for student in students]


def test_empty_search_and_all_status_is_identity() -> None:
    assert filter_students(DEMO_STUDENTS, "", "all") == list(DEMO_STUDENTS)


def test_search_is_case_insensitive() -> None:
    upper = filter_students(DEMO_STUDENTS, "SARAH", "all")
    lower = filter_students(DEMO_STUDENTS, "sarah", "all")

    assert upper == lower
    assert _names(upper) == ["Sarah Johnson"]


def test_search_matches_email_and_course() -> None:
    assert _names(filter_students(DEMO_STUDENTS, "michael.c@", "all")) == ["Michael Chen"]
    assert _names(filter_students(DEMO_STUDENTS, "business", "all")) == ["Emily Rodriguez"]


def test_status_filter_matches_exactly() -> None:
    assert _names(filter_students(DEMO_STUDENTS, "", "inactive")) == ["Emily Rodriguez"]
    assert filter_students(DEMO_STUDENTS, "", "graduated") == []


def test_filters_combine_as_logical_and() -> None:
    result = filter_students(DEMO_STUDENTS, "e", "active")

    # Sarah matches through her email and course, Emily is excluded by status.
    assert _names(result) == ["Sarah Johnson", "Michael Chen"]


def test_search_term_is_not_trimmed() -> None:
    assert filter_students(DEMO_STUDENTS, " chen", "all") != []
    assert filter_students(DEMO_STUDENTS, "chen ", "all") == []


def test_filtering_preserves_input_and_is_idempotent() -> None:
    roster = list(DEMO_STUDENTS)
    first = filter_students(roster, "a", "all")
    second = filter_students(roster, "a", "all")

    assert first == second
    assert roster == list(DEMO_STUDENTS)


def test_unknown_status_matches_nothing() -> None:
    assert filter_students(DEMO_STUDENTS, "", "suspended") == []


def test_compute_stats_counts_whole_roster() -> None:
    stats = compute_stats(DEMO_STUDENTS)

    assert stats.total == 3
    assert stats.active == 2
    assert stats.grade_a == 2


def test_compute_stats_on_empty_roster() -> None:
    stats = compute_stats([])

    assert (stats.total, stats.active, stats.grade_a) == (0, 0, 0)
