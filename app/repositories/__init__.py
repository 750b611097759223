"""Repositories package - access to the static seed document."""

from app.repositories.base import BaseRepository, is_url
from app.repositories.dataset import DatasetLoader

__all__ = [
    "BaseRepository",
    "DatasetLoader",
    "is_url",
]
