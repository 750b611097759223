"""Assemblies API response schemas."""

from pydantic import BaseModel

from web.api.schemas import EmptyPanel


class AssemblyItem(BaseModel):
    """Assembly card."""

    id: str
    name: str
    domain: str
    members: int
    decisions: int
    binding: str
    turnout: str
    selected: bool


class DemographicItem(BaseModel):
    """Demographic share."""

    label: str
    value: str


class AssemblyDetailItem(BaseModel):
    """Selected assembly."""

    id: str
    name: str
    domain: str
    next_session: str
    members: int
    decisions: int
    turnout: str
    stipend: str
    demographics: list[DemographicItem]


class AssembliesResponse(BaseModel):
    """Assemblies tab response."""

    items: list[AssemblyItem]
    detail: AssemblyDetailItem | EmptyPanel
