"""Overview API views - thin layer over services."""

from app.container import container
from app.models.common import LoadState
from web.api.errors import require_dataset
from web.api.schemas import StatCardItem

from .schemas import AuditCoveragePoint, FundingItem, OverviewResponse, PillarSummary


def get_overview(state: LoadState) -> OverviewResponse:
    """Get headline metrics, pillars, audit coverage and funding."""
    dataset = require_dataset(state)
    service = container.dashboard

    return OverviewResponse(
        cards=[StatCardItem(**c.to_dict()) for c in service.overview_cards(dataset)],
        pillars=[
            PillarSummary(
                id=p.id,
                title=p.title,
                icon=p.icon,
                color=p.color,
                description=p.description,
            )
            for p in dataset.charter.pillars
        ],
        audit_series=[AuditCoveragePoint(**row) for row in service.audit_series(dataset)],
        funding=[FundingItem(**f.model_dump()) for f in dataset.funding_stack],
    )
