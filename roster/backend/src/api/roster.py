"""Roster view endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from roster.backend.src.schemas.roster import RosterView
from roster.backend.src.services.session import RosterSession
from roster.backend.src.state import get_session_dependency

router = APIRouter(prefix="/roster", tags=["roster"])


@router.get("", response_model=RosterView)
def roster_view(
    session: Annotated[RosterSession, Depends(get_session_dependency)],
    search: str | None = Query(None, description="Case-insensitive name, email or course search"),
    status_filter: str | None = Query(None, alias="status", description="all, active, inactive or graduated"),
) -> RosterView:
    """Apply any filter changes and return the view the client renders."""

    if search is not None:
        session.search(search)
    if status_filter is not None:
        session.set_status_filter(status_filter)
    return session.view()


@router.post("/reset", response_model=RosterView)
def reset_roster(
    session: Annotated[RosterSession, Depends(get_session_dependency)],
) -> RosterView:
    """Restore the seed roster and clear filters and form."""

    session.reset()
    return session.view()
