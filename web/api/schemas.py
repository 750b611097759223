"""Response schemas shared by several tabs."""

from pydantic import BaseModel


class StatCardItem(BaseModel):
    """Summary card."""

    label: str
    value: str
    sub: str | None = None


class EmptyPanel(BaseModel):
    """Detail panel with nothing selected."""

    prompt: str
