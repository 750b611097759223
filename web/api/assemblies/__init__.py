"""Assemblies API."""

from web.api.assemblies.views import get_assemblies

__all__ = [
    "get_assemblies",
]
