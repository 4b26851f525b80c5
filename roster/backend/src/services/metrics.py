"""Prometheus metric definitions for roster activity."""

from __future__ import annotations

from prometheus_client import Counter

roster_mutations_total = Counter(
    "roster_mutations_total",
    "Total roster mutations by operation.",
    labelnames=["operation"],
)

roster_form_rejections_total = Counter(
    "roster_form_rejections_total",
    "Form field changes and submissions rejected by validation.",
    labelnames=["reason"],
)

__all__ = [
    "roster_mutations_total",
    "roster_form_rejections_total",
]
