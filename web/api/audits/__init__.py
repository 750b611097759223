"""Audits API."""

from web.api.audits.views import get_audits

__all__ = [
    "get_audits",
]
