"""Process-wide roster session management utilities."""

from __future__ import annotations

import threading
from collections.abc import Iterator

from ..core.config import get_settings
from ..services.session import RosterSession

_session: RosterSession | None = None
_session_lock = threading.Lock()


def get_roster_session() -> RosterSession:
    """Return the process-wide session, creating it on first use."""

    global _session
    with _session_lock:
        if _session is None:
            _session = RosterSession.from_settings(get_settings())
        return _session


def get_session_dependency() -> Iterator[RosterSession]:
    """FastAPI dependency wrapping :func:`get_roster_session`."""

    yield get_roster_session()


__all__ = [
    "get_roster_session",
    "get_session_dependency",
]
