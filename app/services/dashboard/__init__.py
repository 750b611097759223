"""Dashboard projection service."""

from app.services.dashboard.service import DashboardService, metric_display

__all__ = [
    "DashboardService",
    "metric_display",
]
