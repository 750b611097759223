"""Charter API response schemas."""

from pydantic import BaseModel


class PrincipleItem(BaseModel):
    """Numbered principle."""

    number: int
    text: str


class PillarItem(BaseModel):
    """Pillar with its principles."""

    id: str
    title: str
    icon: str
    color: str
    description: str
    principles: list[PrincipleItem]


class CharterResponse(BaseModel):
    """Charter tab response."""

    title: str
    purpose: str
    pillars: list[PillarItem]
    enforcement: str
