"""Participation API."""

from web.api.participation.views import get_participation

__all__ = [
    "get_participation",
]
