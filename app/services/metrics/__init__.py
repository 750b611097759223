"""Derived metrics service."""

from app.services.metrics.service import MetricsService, resolution_rate

__all__ = [
    "MetricsService",
    "resolution_rate",
]
