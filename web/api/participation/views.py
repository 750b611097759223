"""Participation API views - thin layer over services."""

from app.container import container
from app.models.common import LoadState
from web.api.errors import require_dataset
from web.api.schemas import StatCardItem

from .schemas import EquityItem, GaugeItem, ParticipationPointItem, ParticipationResponse


def get_participation(state: LoadState) -> ParticipationResponse:
    """Get participation cards, equity tiles, scores and per-assembly series."""
    dataset = require_dataset(state)
    service = container.dashboard

    return ParticipationResponse(
        cards=[StatCardItem(**c.to_dict()) for c in service.participation_cards(dataset)],
        equity=[EquityItem(**t.to_dict()) for t in service.equity_tiles(dataset)],
        satisfaction=GaugeItem(**service.satisfaction(dataset).to_dict()),
        accessibility=GaugeItem(**service.accessibility(dataset).to_dict()),
        series=[ParticipationPointItem(**p.to_dict()) for p in service.participation_series(dataset)],
    )
