"""Dashboard entities - display-ready projections."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass
class StatCard(BaseEntity):
    """Summary card: label, formatted value, optional sub-line."""

    label: str
    value: str
    sub: str | None = None


@dataclass
class NoSelection(BaseEntity):
    """Detail panel with nothing (or a stale id) selected."""

    prompt: str


@dataclass
class AssemblyCard(BaseEntity):
    id: str
    name: str
    domain: str
    members: int
    decisions: int
    binding: str
    turnout: str
    selected: bool


@dataclass
class DemographicTile(BaseEntity):
    label: str
    value: str


@dataclass
class AssemblyDetail(BaseEntity):
    """Drill-down panel for one assembly."""

    id: str
    name: str
    domain: str
    next_session: str
    members: int
    decisions: int
    turnout: str
    stipend: str
    demographics: list[DemographicTile] = field(default_factory=list)


@dataclass
class ModuleCard(BaseEntity):
    id: str
    title: str
    badge: str
    is_ga: bool
    preview: str
    selected: bool


@dataclass
class MetricRow(BaseEntity):
    """Humanized metric name and its display value."""

    label: str
    value: str


@dataclass
class ModuleDetail(BaseEntity):
    """Drill-down panel for one module."""

    id: str
    title: str
    description: str
    badge: str
    is_ga: bool
    features: list[str] = field(default_factory=list)
    tech_stack: str = ""
    metrics: list[MetricRow] = field(default_factory=list)


@dataclass
class EquityTile(BaseEntity):
    key: str
    label: str
    value: str
    band: str
    fill: float


@dataclass
class ParticipationPoint(BaseEntity):
    """Per-assembly chart point: members and turnout in whole percent."""

    name: str
    members: int
    turnout: int


@dataclass
class ScoreGauge(BaseEntity):
    """Headline score with its bar fill fraction."""

    label: str
    value: str
    fill: float
