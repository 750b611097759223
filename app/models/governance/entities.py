"""Governance entities - computed values and tagged metric values."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass
class NumberMetric(BaseEntity):
    """Numeric module metric."""

    value: int | float


@dataclass
class TextMetric(BaseEntity):
    """Free-text module metric."""

    value: str


MetricValue = NumberMetric | TextMetric


def tag_metric(raw: bool | int | float | str) -> MetricValue:
    """Wrap a raw metric value in its tagged form. Booleans are text (true / false)."""
    if isinstance(raw, bool):
        return TextMetric("true" if raw else "false")
    if isinstance(raw, (int, float)):
        return NumberMetric(raw)
    return TextMetric(str(raw))
