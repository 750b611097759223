"""Common models - base classes and shared state records."""

from app.models.common.base import BaseEntity
from app.models.common.load_state import LoadState, LoadStatus

__all__ = [
    "BaseEntity",
    "LoadState",
    "LoadStatus",
]
