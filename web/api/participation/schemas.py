"""Participation API response schemas."""

from pydantic import BaseModel

from web.api.schemas import StatCardItem


class EquityItem(BaseModel):
    """Equity index tile."""

    key: str
    label: str
    value: str
    band: str
    fill: float


class GaugeItem(BaseModel):
    """Score with fill fraction."""

    label: str
    value: str
    fill: float


class ParticipationPointItem(BaseModel):
    """Per-assembly chart point."""

    name: str
    members: int
    turnout: int


class ParticipationResponse(BaseModel):
    """Participation tab response."""

    cards: list[StatCardItem]
    equity: list[EquityItem]
    satisfaction: GaugeItem
    accessibility: GaugeItem
    series: list[ParticipationPointItem]
