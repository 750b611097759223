"""Modules API views - thin layer over services."""

from app.container import container
from app.models.common import LoadState
from app.models.dashboard import NoSelection
from app.services.selection import SelectionState
from web.api.errors import require_dataset
from web.api.schemas import EmptyPanel

from .schemas import ModuleDetailItem, ModuleItem, ModulesResponse


def get_modules(state: LoadState, selection: SelectionState) -> ModulesResponse:
    """Get module cards and the detail panel for the current selection."""
    dataset = require_dataset(state)
    service = container.dashboard

    items = [ModuleItem(**c.to_dict()) for c in service.module_cards(dataset, selection)]

    detail = service.module_detail(dataset, selection)
    if isinstance(detail, NoSelection):
        panel = EmptyPanel(prompt=detail.prompt)
    else:
        panel = ModuleDetailItem(**detail.to_dict())

    return ModulesResponse(items=items, detail=panel)
