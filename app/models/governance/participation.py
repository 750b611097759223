"""Participation and funding schemas."""

from pydantic import BaseModel, Field


class ParticipationSchema(BaseModel):
    """Resident participation and equity figures."""

    total_residents: int = Field(alias="totalResidents")
    registered: int
    active_voters: int = Field(alias="activeVoters")
    assembly_participants: int = Field(alias="assemblyParticipants")
    avg_turnout_rate: float = Field(alias="avgTurnoutRate")
    quadratic_votes_last_quarter: int = Field(alias="quadraticVotesLastQuarter")
    # Group -> parity index, 1.0 = parity
    demographic_equity: dict[str, float] = Field(alias="demographicEquity", default={})
    satisfaction_index: float = Field(alias="satisfactionIndex")
    accessibility_score: float = Field(alias="accessibilityScore")

    class Config:
        populate_by_name = True
        frozen = True


class FundingItemSchema(BaseModel):
    """Funding stack entry (value is pre-formatted)."""

    label: str
    value: str
    sub: str
    color: str

    class Config:
        frozen = True
