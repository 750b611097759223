"""Governance domain models - seed document schemas and metric entities."""

from app.models.governance.assembly import AssemblySchema, DemographicsSchema
from app.models.governance.audit import AuditYearSchema
from app.models.governance.charter import CharterSchema, PillarSchema
from app.models.governance.dataset import Dataset
from app.models.governance.entities import MetricValue, NumberMetric, TextMetric, tag_metric
from app.models.governance.module import GovModuleSchema
from app.models.governance.participation import FundingItemSchema, ParticipationSchema

__all__ = [
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
    "tag_metric",
]
