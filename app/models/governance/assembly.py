"""Citizen assembly schemas."""

from pydantic import BaseModel, Field


class DemographicsSchema(BaseModel):
    """Assembly composition in percent. Groups are not required to sum to 100."""

    age_18_34: float = Field(alias="age18_34")
    age_35_54: float = Field(alias="age35_54")
    age_55_plus: float = Field(alias="age55plus")
    female: float
    male: float
    nonbinary: float

    class Config:
        populate_by_name = True
        frozen = True


class AssemblySchema(BaseModel):
    """Citizen assembly."""

    id: str
    name: str
    domain: str
    members: int = Field(ge=0)
    demographics: DemographicsSchema
    meetings_held: int = Field(alias="meetingsHeld")
    decisions_issued: int = Field(alias="decisionsIssued")
    # Fractions 0-1
    binding_rate: float = Field(alias="bindingRate")
    avg_turnout: float = Field(alias="avgTurnout")
    stipend_per_session: int | float = Field(alias="stipendPerSession")
    next_session: str = Field(alias="nextSession")

    class Config:
        populate_by_name = True
        frozen = True
