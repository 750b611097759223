"""Assemblies API views - thin layer over services."""

from app.container import container
from app.models.common import LoadState
from app.models.dashboard import NoSelection
from app.services.selection import SelectionState
from web.api.errors import require_dataset
from web.api.schemas import EmptyPanel

from .schemas import AssembliesResponse, AssemblyDetailItem, AssemblyItem


def get_assemblies(state: LoadState, selection: SelectionState) -> AssembliesResponse:
    """Get assembly cards and the detail panel for the current selection."""
    dataset = require_dataset(state)
    service = container.dashboard

    items = [AssemblyItem(**c.to_dict()) for c in service.assembly_cards(dataset, selection)]

    detail = service.assembly_detail(dataset, selection)
    if isinstance(detail, NoSelection):
        panel = EmptyPanel(prompt=detail.prompt)
    else:
        panel = AssemblyDetailItem(**detail.to_dict())

    return AssembliesResponse(items=items, detail=panel)
