"""Governance module schemas."""

from pydantic import BaseModel, Field, StrictBool

from settings import GA_STATUS


class GovModuleSchema(BaseModel):
    """Composable governance module (GA or in development)."""

    id: str
    title: str
    status: str
    version: str
    description: str = Field(alias="desc")
    features: tuple[str, ...] = ()
    tech_stack: str = Field(alias="techStack")
    # Open-ended; see app.models.governance.entities for the tagged form
    metrics: dict[str, StrictBool | int | float | str] = {}

    class Config:
        populate_by_name = True
        frozen = True

    @property
    def is_ga(self) -> bool:
        return self.status == GA_STATUS
