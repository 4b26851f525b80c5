"""Form intent endpoints for creating and editing students."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from roster.backend.src.schemas.form import FieldChange, FieldUpdateResult, FormState
from roster.backend.src.schemas.student import Student
from roster.backend.src.services.session import RosterSession
from roster.backend.src.state import get_session_dependency

router = APIRouter(prefix="/form", tags=["form"])

SessionDep = Annotated[RosterSession, Depends(get_session_dependency)]


@router.get("", response_model=FormState)
def form_state(session: SessionDep) -> FormState:
    return session.form_state()


@router.post("/toggle", response_model=FormState)
def toggle_form(session: SessionDep) -> FormState:
    """Open a blank create form, or close the open form."""

    return session.toggle_form()


@router.post("/edit/{student_id}", response_model=FormState)
def begin_edit(student_id: str, session: SessionDep) -> FormState:
    """Load an existing student into the form."""

    return session.begin_edit(student_id)


@router.patch("/fields", response_model=FieldUpdateResult)
def change_field(payload: FieldChange, session: SessionDep) -> FieldUpdateResult:
    """Merge one field change into the draft."""

    result = session.change_field(payload.field, payload.value)
    if not result.accepted:
        raise HTTPException(
            status_code=422,
            detail=result.model_dump(),
        )
    return result


@router.post("/submit", response_model=Student)
def submit_form(session: SessionDep, response: Response) -> Student:
    """Save the draft as a new student or as an update of the edited one."""

    student, created = session.submit_form()
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return student


@router.post("/cancel", response_model=FormState)
def cancel_form(session: SessionDep) -> FormState:
    """Discard the draft and close the form."""

    return session.cancel_form()
