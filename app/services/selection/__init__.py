"""Tab and drill-down selection state."""

from app.services.selection.state import (
    SelectionState,
    Tab,
    select_tab,
    toggle_assembly,
    toggle_module,
)

__all__ = [
    "SelectionState",
    "Tab",
    "select_tab",
    "toggle_assembly",
    "toggle_module",
]
