"""Top-level seed document."""

from pydantic import BaseModel, Field

from app.models.governance.assembly import AssemblySchema
from app.models.governance.audit import AuditYearSchema
from app.models.governance.charter import CharterSchema
from app.models.governance.module import GovModuleSchema
from app.models.governance.participation import FundingItemSchema, ParticipationSchema


class Dataset(BaseModel):
    """Whole governance dataset, loaded once and never mutated."""

    charter: CharterSchema
    assemblies: tuple[AssemblySchema, ...]
    modules: tuple[GovModuleSchema, ...]
    audit_timeline: tuple[AuditYearSchema, ...] = Field(alias="auditTimeline")
    participation: ParticipationSchema
    funding_stack: tuple[FundingItemSchema, ...] = Field(alias="fundingStack")

    class Config:
        populate_by_name = True
        frozen = True
