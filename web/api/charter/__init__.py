"""Charter API."""

from web.api.charter.views import get_charter

__all__ = [
    "get_charter",
]
