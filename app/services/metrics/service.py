"""Derived metrics over a loaded dataset, memoized per dataset."""

from collections.abc import Callable
from typing import Any

from loguru import logger

from app.models.governance import AuditYearSchema, Dataset
from helpers import formulas


def resolution_rate(audit: AuditYearSchema) -> float:
    """resolved / incidents, denominator floored at 1 (zero incidents -> resolved / 1)."""
    return formulas.rate(audit.resolved, audit.incidents)


class MetricsService:
    """Aggregates derived from a dataset. Results are cached until a different dataset is passed."""

    def __init__(self):
        self._dataset: Dataset | None = None
        self._cache: dict[str, Any] = {}
        logger.debug("MetricsService initialized")

    def _cached(self, dataset: Dataset, key: str, fn: Callable[[], Any]) -> Any:
        """Get from cache or compute. Cache is keyed by dataset identity."""
        if dataset is not self._dataset:
            self._dataset = dataset
            self._cache.clear()
        if key not in self._cache:
            self._cache[key] = fn()
            logger.debug("Cache miss: {}", key)
        return self._cache[key]

    def total_decisions(self, dataset: Dataset) -> int:
        """Sum of decisions issued over all assemblies."""
        return self._cached(
            dataset,
            "total_decisions",
            lambda: sum(a.decisions_issued for a in dataset.assemblies),
        )

    def average_binding_rate(self, dataset: Dataset) -> float | None:
        """Mean binding rate, None when there are no assemblies."""
        return self._cached(
            dataset,
            "average_binding_rate",
            lambda: formulas.mean([a.binding_rate for a in dataset.assemblies]),
        )

    def latest_audit(self, dataset: Dataset) -> AuditYearSchema | None:
        """Last entry of the year-ordered audit timeline, None when empty."""
        return self._cached(
            dataset,
            "latest_audit",
            lambda: dataset.audit_timeline[-1] if dataset.audit_timeline else None,
        )

    def latest_resolution_rate(self, dataset: Dataset) -> float | None:
        """Resolution rate of the latest audit year."""
        latest = self.latest_audit(dataset)
        return resolution_rate(latest) if latest else None

    def ga_module_count(self, dataset: Dataset) -> int:
        """Number of generally available modules."""
        return self._cached(
            dataset,
            "ga_module_count",
            lambda: sum(1 for m in dataset.modules if m.is_ga),
        )
