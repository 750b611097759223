"""Dataset load lifecycle: pending -> ready | failed."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.models.governance import Dataset


class LoadStatus(StrEnum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class LoadState:
    """Immutable snapshot of the dataset load lifecycle."""

    status: LoadStatus
    dataset: Dataset | None = None
    error: str | None = None

    @classmethod
    def pending(cls) -> LoadState:
        return cls(LoadStatus.PENDING)

    @classmethod
    def ready(cls, dataset: Dataset) -> LoadState:
        return cls(LoadStatus.READY, dataset=dataset)

    @classmethod
    def failed(cls, error: str) -> LoadState:
        return cls(LoadStatus.FAILED, error=error)

    @property
    def is_ready(self) -> bool:
        return self.status == LoadStatus.READY and self.dataset is not None

    @property
    def is_terminal(self) -> bool:
        return self.status != LoadStatus.PENDING
