"""Student record endpoints."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from roster.backend.src.schemas.student import RosterStats, Student
from roster.backend.src.services.session import RosterSession
from roster.backend.src.state import get_session_dependency

router = APIRouter(prefix="/students", tags=["students"])

logger = logging.getLogger(__name__)


@router.get("", response_model=list[Student])
def list_students(
    session: Annotated[RosterSession, Depends(get_session_dependency)],
) -> tuple[Student, ...]:
    """Return the full roster in insertion order."""

    return session.store.list()


@router.get("/stats", response_model=RosterStats)
def roster_stats(
    session: Annotated[RosterSession, Depends(get_session_dependency)],
) -> RosterStats:
    """Return total, active and A-grade counts for the whole roster."""

    return session.stats()


@router.get("/{student_id}", response_model=Student)
def get_student(
    student_id: str,
    session: Annotated[RosterSession, Depends(get_session_dependency)],
) -> Student:
    return session.store.get(student_id)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: str,
    session: Annotated[RosterSession, Depends(get_session_dependency)],
    confirm: bool = Query(False, description="Must be true to apply the deletion"),
) -> Response:
    """Delete a student once the caller confirmed the action."""

    if not session.delete_student(student_id, confirmed=confirm):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Deletion requires confirmation",
        )
    logger.info("Deleted student %s", student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
