"""Identifier generators for new roster records."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from uuid import uuid4

IdGenerator = Callable[[], str]


def counter_ids(start: int = 1) -> IdGenerator:
    """Return a generator yielding "1", "2", ... starting at ``start``."""

    counter = itertools.count(start)
    return lambda: str(next(counter))


def uuid_ids() -> IdGenerator:
    """Return a generator yielding random hex UUIDs."""

    return lambda: uuid4().hex


def build_id_generator(strategy: str) -> IdGenerator:
    """Return the generator configured by ``strategy``."""

    if strategy == "counter":
        return counter_ids()
    if strategy == "uuid":
        return uuid_ids()
    raise ValueError(f"Unknown id strategy: {strategy}")


__all__ = ["IdGenerator", "build_id_generator", "counter_ids", "uuid_ids"]
