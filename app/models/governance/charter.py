"""Charter and pillar schemas."""

from pydantic import BaseModel, Field


class PillarSchema(BaseModel):
    """Charter pillar."""

    id: str
    title: str
    icon: str
    color: str
    description: str = Field(alias="desc")
    principles: tuple[str, ...] = ()

    class Config:
        populate_by_name = True
        frozen = True


class CharterSchema(BaseModel):
    """Governance charter."""

    title: str
    purpose: str
    pillars: tuple[PillarSchema, ...] = ()
    enforcement: str

    class Config:
        frozen = True
