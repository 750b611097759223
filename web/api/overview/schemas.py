"""Overview API response schemas."""

from pydantic import BaseModel

from web.api.schemas import StatCardItem


class PillarSummary(BaseModel):
    """Pillar as shown on the overview."""

    id: str
    title: str
    icon: str
    color: str
    description: str


class AuditCoveragePoint(BaseModel):
    """Audit timeline row."""

    year: int
    audited: float
    total: int
    incidents: int
    resolved: int


class FundingItem(BaseModel):
    """Funding stack entry."""

    label: str
    value: str
    sub: str
    color: str


class OverviewResponse(BaseModel):
    """Overview tab response."""

    cards: list[StatCardItem]
    pillars: list[PillarSummary]
    audit_series: list[AuditCoveragePoint]
    funding: list[FundingItem]
