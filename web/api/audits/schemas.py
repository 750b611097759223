"""Audits API response schemas."""

from pydantic import BaseModel

from web.api.overview.schemas import AuditCoveragePoint
from web.api.schemas import StatCardItem


class AuditsResponse(BaseModel):
    """Audit tracker response."""

    cards: list[StatCardItem]
    series: list[AuditCoveragePoint]
