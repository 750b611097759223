"""Selection reducer: active tab plus at most one assembly and one module."""

from dataclasses import dataclass, replace
from enum import StrEnum


class Tab(StrEnum):
    OVERVIEW = "overview"
    CHARTER = "charter"
    ASSEMBLIES = "assemblies"
    MODULES = "modules"
    AUDITS = "audits"
    PARTICIPATION = "participation"


@dataclass(frozen=True)
class SelectionState:
    """Immutable UI selection. Ids are not checked against the dataset."""

    tab: Tab = Tab.OVERVIEW
    assembly_id: str | None = None
    module_id: str | None = None


def select_tab(state: SelectionState, tab: Tab | str) -> SelectionState:
    """Switch tab, keeping both selections."""
    return replace(state, tab=Tab(tab))


def _toggle(current: str | None, item_id: str) -> str | None:
    return None if current == item_id else item_id


def toggle_assembly(state: SelectionState, assembly_id: str) -> SelectionState:
    """Select an assembly, or deselect it if already selected."""
    return replace(state, assembly_id=_toggle(state.assembly_id, assembly_id))


def toggle_module(state: SelectionState, module_id: str) -> SelectionState:
    """Select a module, or deselect it if already selected."""
    return replace(state, module_id=_toggle(state.module_id, module_id))
