"""Dataset integrity checks."""

from app.services.integrity.checks import validate_dataset

__all__ = [
    "validate_dataset",
]
