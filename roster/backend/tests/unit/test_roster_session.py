"""Unit tests for the roster session that owns store, filters and form."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

import pytest
from fastapi import HTTPException

from roster.backend.src.core.config import Settings
from roster.backend.src.schemas.form import FormMode
from roster.backend.src.schemas.student import Grade, StudentStatus
from roster.backend.src.services.ids import counter_ids
from roster.backend.src.services.session import RosterSession


@pytest.fixture()
def session() -> RosterSession:
    return RosterSession.from_settings(Settings(), id_generator=counter_ids())


def test_session_starts_with_seeded_roster(session: RosterSession) -> None:
    view = session.view()

    assert [student.name for student in view.students] == [
        "Sarah Johnson",
        "Michael Chen",
        "Emily Rodriguez",
    ]
    assert view.visible_count == 3
    assert view.is_roster_empty is False
    assert view.form.visible is False


def test_session_without_seed_data_is_empty() -> None:
    session = RosterSession.from_settings(Settings(ROSTER_SEED_DEMO_DATA=False))

    view = session.view()

    assert view.students == []
    assert view.is_roster_empty is True
    assert view.stats.total == 0


def test_filters_apply_to_view_but_not_stats(session: RosterSession) -> None:
    session.search("EMILY")
    session.set_status_filter("inactive")

    view = session.view()

    assert [student.name for student in view.students] == ["Emily Rodriguez"]
    assert view.visible_count == 1
    assert view.stats.total == 3
    assert view.search_term == "EMILY"
    assert view.status_filter == "inactive"


def test_status_filter_accepts_enum_member(session: RosterSession) -> None:
    session.set_status_filter(StudentStatus.ACTIVE)

    assert session.status_filter == "active"
    assert session.view().visible_count == 2


def test_unknown_status_filter_is_rejected(session: RosterSession) -> None:
    with pytest.raises(HTTPException) as exc_info:
        session.set_status_filter("suspended")

    assert exc_info.value.status_code == 422
    assert session.status_filter == "all"


def test_full_create_flow_through_intents(session: RosterSession) -> None:
    session.toggle_form()
    for field, value in {
        "name": "Jordan Lee",
        "email": "jordan.l@email.com",
        "course": "Physics",
        "age": "24",
        "grade": "C",
    }.items():
        assert session.change_field(field, value).accepted

    created, was_new = session.submit_form()

    assert was_new is True
    view = session.view()
    assert view.students[-1] == created
    assert created.id == "4"
    assert view.stats.total == 4
    assert view.form.mode is FormMode.IDLE


def test_begin_edit_unknown_student_raises_not_found(session: RosterSession) -> None:
    with pytest.raises(HTTPException) as exc_info:
        session.begin_edit("missing")

    assert exc_info.value.status_code == 404
    assert session.form.mode is FormMode.IDLE


def test_begin_edit_then_cancel_keeps_roster(session: RosterSession) -> None:
    before = session.store.list()

    state = session.begin_edit("2")
    assert state.mode is FormMode.EDITING
    assert state.editing_id == "2"
    session.change_field("course", "Architecture")
    session.cancel_form()

    assert session.store.list() == before


def test_delete_requires_confirmation(session: RosterSession) -> None:
    assert session.delete_student("1", confirmed=False) is False
    assert session.view().stats.total == 3

    assert session.delete_student("1", confirmed=True) is True
    assert [student.id for student in session.view().students] == ["2", "3"]


def test_reset_restores_seed_and_clears_state(session: RosterSession) -> None:
    session.delete_student("1", confirmed=True)
    session.search("chen")
    session.toggle_form()

    session.reset()

    view = session.view()
    assert view.visible_count == 3
    assert view.search_term == ""
    assert view.status_filter == "all"
    assert view.form.visible is False


def test_submit_in_edit_mode_reports_update(session: RosterSession) -> None:
    session.begin_edit("3")
    session.change_field("status", StudentStatus.GRADUATED)

    updated, was_new = session.submit_form()

    assert was_new is False
    assert updated.id == "3"
    assert updated.status is StudentStatus.GRADUATED
    assert session.form_state().mode is FormMode.IDLE


def test_change_field_accepts_enum_members(session: RosterSession) -> None:
    session.begin_edit("2")

    result = session.change_field("grade", Grade.C)

    assert result.accepted is True
    assert session.form_state().draft.grade is Grade.C


def test_form_state_matches_open_form(session: RosterSession) -> None:
    session.toggle_form()

    state = session.form_state()

    assert state.visible is True
    assert state.mode is FormMode.CREATING
