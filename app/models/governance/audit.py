"""Audit timeline schema."""

from pydantic import BaseModel


class AuditYearSchema(BaseModel):
    """One year of AI audit tracking. `audited` is percent coverage (0-100)."""

    year: int
    audited: float
    total: int
    incidents: int
    resolved: int

    class Config:
        frozen = True
