"""Services package - service class exports."""

from app.services.dashboard import DashboardService
from app.services.metrics import MetricsService
from app.services.selection import SelectionState, Tab

__all__ = [
    "DashboardService",
    "MetricsService",
    "SelectionState",
    "Tab",
]
