"""Audits API views - thin layer over services."""

from app.container import container
from app.models.common import LoadState
from web.api.errors import require_dataset
from web.api.overview.schemas import AuditCoveragePoint
from web.api.schemas import StatCardItem

from .schemas import AuditsResponse


def get_audits(state: LoadState) -> AuditsResponse:
    """Get latest-year audit cards and the full timeline."""
    dataset = require_dataset(state)
    service = container.dashboard

    return AuditsResponse(
        cards=[StatCardItem(**c.to_dict()) for c in service.audit_cards(dataset)],
        series=[AuditCoveragePoint(**row) for row in service.audit_series(dataset)],
    )
