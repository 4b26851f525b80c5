"""Roster view schemas consumed by the presentation layer."""

from __future__ import annotations

from pydantic import BaseModel

from .form import FormState
from .student import RosterStats, Student


class RosterView(BaseModel):
    """Everything the presentation layer renders after an intent."""

    students: list[Student]
    visible_count: int
    stats: RosterStats
    search_term: str
    status_filter: str
    is_roster_empty: bool
    form: FormState


__all__ = ["RosterView"]
