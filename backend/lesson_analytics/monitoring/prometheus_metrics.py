"""
Prometheus metrics for lesson analytics.

Metrics live on a dedicated registry so they can be exposed without the
default process collectors.
"""

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Histogram, generate_latest

REGISTRY = CollectorRegistry()

analytics_compute_seconds = Histogram(
    "lesson_analytics_compute_seconds",
    "Time spent aggregating a month of lessons (seconds)",
    labelnames=("audience",),
    registry=REGISTRY,
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

analytics_lessons_in_window = Histogram(
    "lesson_analytics_lessons_in_window",
    "Number of lessons in the requested month",
    labelnames=("audience",),
    registry=REGISTRY,
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 500),
)


def render_latest() -> tuple[bytes, str]:
    """Return the exposition payload and its content type."""
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST


__all__ = [
    "REGISTRY",
    "analytics_compute_seconds",
    "analytics_lessons_in_window",
    "render_latest",
]
