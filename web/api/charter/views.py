"""Charter API views."""

from app.models.common import LoadState
from web.api.errors import require_dataset

from .schemas import CharterResponse, PillarItem, PrincipleItem


def get_charter(state: LoadState) -> CharterResponse:
    """Get charter with numbered principles per pillar."""
    charter = require_dataset(state).charter

    pillars = [
        PillarItem(
            id=p.id,
            title=p.title,
            icon=p.icon,
            color=p.color,
            description=p.description,
            principles=[PrincipleItem(number=i, text=text) for i, text in enumerate(p.principles, start=1)],
        )
        for p in charter.pillars
    ]

    return CharterResponse(
        title=charter.title,
        purpose=charter.purpose,
        pillars=pillars,
        enforcement=charter.enforcement,
    )
