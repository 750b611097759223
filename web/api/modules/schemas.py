"""Modules API response schemas."""

from pydantic import BaseModel

from web.api.schemas import EmptyPanel


class ModuleItem(BaseModel):
    """Module card."""

    id: str
    title: str
    badge: str
    is_ga: bool
    preview: str
    selected: bool


class MetricItem(BaseModel):
    """Module metric row."""

    label: str
    value: str


class ModuleDetailItem(BaseModel):
    """Selected module."""

    id: str
    title: str
    description: str
    badge: str
    is_ga: bool
    features: list[str]
    tech_stack: str
    metrics: list[MetricItem]


class ModulesResponse(BaseModel):
    """Modules tab response."""

    items: list[ModuleItem]
    detail: ModuleDetailItem | EmptyPanel
