"""Public API routers exposed by the FastAPI application."""

from . import (
    form,
    health,
    roster,
    students,
)

__all__ = [
    "form",
    "health",
    "roster",
    "students",
]
