"""Overview API."""

from web.api.overview.views import get_overview

__all__ = [
    "get_overview",
]
