"""Base entity class for computed values and display projections."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities (plain dataclasses, not tied to the seed schema)."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity, including nested entities, to a dictionary."""
        return asdict(self)
