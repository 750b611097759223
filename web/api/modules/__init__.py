"""Modules API."""

from web.api.modules.views import get_modules

__all__ = [
    "get_modules",
]
