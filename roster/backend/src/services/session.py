"""Roster session binding the store, filters and form into one owner."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

import structlog
from fastapi import HTTPException

from roster.backend.src.core.config import Settings
from roster.backend.src.schemas.form import FieldUpdateResult, FormMode, FormState
from roster.backend.src.schemas.roster import RosterView
from roster.backend.src.schemas.student import (
    STATUS_FILTER_ALL,
    RosterStats,
    Student,
    StudentStatus,
)
from roster.backend.src.services.filtering import compute_stats, filter_students
from roster.backend.src.services.form_draft import FormDraftController
from roster.backend.src.services.ids import IdGenerator, build_id_generator
from roster.backend.src.services.roster import RosterStore
from roster.backend.src.services.seed import demo_students

LOGGER = structlog.get_logger(__name__)

STATUS_FILTER_CHOICES: frozenset[str] = frozenset(
    {STATUS_FILTER_ALL, *(item.value for item in StudentStatus)}
)


class RosterSession:
    """Single owner of the roster, the active filters and the form draft.

    Every intent runs under one lock so intents stay strictly sequential even
    when the HTTP layer dispatches them from a thread pool.
    """

    def __init__(
        self,
        store: RosterStore,
        form: FormDraftController,
        *,
        seed: Iterable[Student] = (),
    ) -> None:
        self.store = store
        self.form = form
        self.search_term = ""
        self.status_filter = STATUS_FILTER_ALL
        self._seed = tuple(seed)
        self._lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        id_generator: IdGenerator | None = None,
    ) -> "RosterSession":
        """Build a session (seeded when configured) from application settings."""

        seed = demo_students(settings.seed_demo_data)
        store = RosterStore(
            seed,
            id_generator=id_generator or build_id_generator(settings.id_strategy),
        )
        form = FormDraftController(
            store,
            default_age=settings.default_age,
            age_hint=settings.age_hint,
        )
        return cls(store, form, seed=seed)

    def search(self, term: str) -> None:
        with self._lock:
            self.search_term = term

    def set_status_filter(self, value: str) -> None:
        """Restrict the view to one status, or ``all``."""

        if isinstance(value, StudentStatus):
            value = value.value
        if value not in STATUS_FILTER_CHOICES:
            raise HTTPException(
                status_code=422,
                detail=f"Unknown status filter: {value}",
            )
        with self._lock:
            self.status_filter = value

    def toggle_form(self) -> FormState:
        with self._lock:
            self.form.toggle()
            return self.form.state()

    def begin_edit(self, student_id: str) -> FormState:
        with self._lock:
            self.form.begin_edit(self.store.get(student_id))
            return self.form.state()

    def change_field(self, field: str, value: Any) -> FieldUpdateResult:
        with self._lock:
            return self.form.update_field(field, value)

    def form_state(self) -> FormState:
        with self._lock:
            return self.form.state()

    def submit_form(self) -> tuple[Student, bool]:
        """Submit the open form, returning the saved student and whether it was new."""

        with self._lock:
            created = self.form.mode is FormMode.CREATING
            return self.form.submit(), created

    def cancel_form(self) -> FormState:
        with self._lock:
            self.form.cancel()
            return self.form.state()

    def delete_student(self, student_id: str, *, confirmed: bool) -> bool:
        with self._lock:
            return self.store.delete(student_id, confirmed=confirmed)

    def stats(self) -> RosterStats:
        with self._lock:
            return compute_stats(self.store.list())

    def view(self) -> RosterView:
        """Return the derived data rendered after each intent."""

        with self._lock:
            roster = self.store.list()
            visible = filter_students(roster, self.search_term, self.status_filter)
            return RosterView(
                students=visible,
                visible_count=len(visible),
                stats=compute_stats(roster),
                search_term=self.search_term,
                status_filter=self.status_filter,
                is_roster_empty=not roster,
                form=self.form.state(),
            )

    def reset(self) -> None:
        """Restore the seed roster, clear the filters and close the form."""

        with self._lock:
            self.store.reset(self._seed)
            self.form.cancel()
            self.search_term = ""
            self.status_filter = STATUS_FILTER_ALL
            LOGGER.info("roster_reset", total=len(self.store))


__all__ = ["RosterSession", "STATUS_FILTER_CHOICES"]
