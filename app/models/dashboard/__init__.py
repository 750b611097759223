"""Dashboard models - display projections."""

from app.models.dashboard.entities import (
    AssemblyCard,
    AssemblyDetail,
    DemographicTile,
    EquityTile,
    MetricRow,
    ModuleCard,
    ModuleDetail,
    NoSelection,
    ParticipationPoint,
    ScoreGauge,
    StatCard,
)

__all__ = [
    "StatCard",
    "NoSelection",
    "AssemblyCard",
    "AssemblyDetail",
    "DemographicTile",
    "ModuleCard",
    "ModuleDetail",
    "MetricRow",
    "EquityTile",
    "ParticipationPoint",
    "ScoreGauge",
]
