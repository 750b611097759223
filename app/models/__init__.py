"""Models package - seed document schemas and entities."""

from app.models.common import BaseEntity, LoadState, LoadStatus
from app.models.dashboard import (
    AssemblyCard,
    AssemblyDetail,
    EquityTile,
    ModuleCard,
    ModuleDetail,
    NoSelection,
    StatCard,
)
from app.models.governance import (
    AssemblySchema,
    AuditYearSchema,
    CharterSchema,
    Dataset,
    DemographicsSchema,
    FundingItemSchema,
    GovModuleSchema,
    MetricValue,
    NumberMetric,
    ParticipationSchema,
    PillarSchema,
    TextMetric,
)

__all__ = [
    # Common
    "BaseEntity",
    "LoadState",
    "LoadStatus",
    # Dashboard
    "StatCard",
    "NoSelection",
    "AssemblyCard",
    "AssemblyDetail",
    "ModuleCard",
    "ModuleDetail",
    "EquityTile",
    # Governance
    "Dataset",
    "CharterSchema",
    "PillarSchema",
    "AssemblySchema",
    "DemographicsSchema",
    "GovModuleSchema",
    "AuditYearSchema",
    "ParticipationSchema",
    "FundingItemSchema",
    "MetricValue",
    "NumberMetric",
    "TextMetric",
]
