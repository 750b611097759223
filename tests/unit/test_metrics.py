"""Tests for derived metrics."""

import pytest

from app.models.governance import AuditYearSchema
from app.services.metrics import MetricsService, resolution_rate


@pytest.fixture
def metrics():
    return MetricsService()


class TestTotals:
    def test_total_decisions(self, metrics, dataset):
        assert metrics.total_decisions(dataset) == 40

    def test_total_decisions_empty(self, metrics, dataset):
        empty = dataset.model_copy(update={"assemblies": ()})
        assert metrics.total_decisions(empty) == 0

    def test_ga_module_count(self, metrics, dataset):
        assert metrics.ga_module_count(dataset) == 1

    def test_ga_module_count_empty(self, metrics, dataset):
        assert metrics.ga_module_count(dataset.model_copy(update={"modules": ()})) == 0


class TestAverageBindingRate:
    def test_mean(self, metrics, dataset):
        rates = [a.binding_rate for a in dataset.assemblies]
        assert metrics.average_binding_rate(dataset) == pytest.approx(sum(rates) / len(rates))

    def test_empty_is_none(self, metrics, dataset):
        empty = dataset.model_copy(update={"assemblies": ()})
        assert metrics.average_binding_rate(empty) is None


class TestLatestAudit:
    def test_last_year(self, metrics, dataset):
        latest = metrics.latest_audit(dataset)
        assert latest.year == 2027
        assert resolution_rate(latest) == 1.0

    def test_empty_timeline(self, metrics, dataset):
        empty = dataset.model_copy(update={"audit_timeline": ()})
        assert metrics.latest_audit(empty) is None
        assert metrics.latest_resolution_rate(empty) is None

    def test_latest_resolution_rate(self, metrics, dataset):
        assert metrics.latest_resolution_rate(dataset) == 1.0


class TestResolutionRate:
    def test_zero_incidents(self):
        audit = AuditYearSchema(year=2030, audited=50, total=10, incidents=0, resolved=0)
        assert resolution_rate(audit) == 0

    def test_partial(self):
        audit = AuditYearSchema(year=2026, audited=10, total=50, incidents=2, resolved=1)
        assert resolution_rate(audit) == 0.5

    def test_resolved_without_incidents(self):
        audit = AuditYearSchema(year=2031, audited=60, total=10, incidents=0, resolved=1)
        assert resolution_rate(audit) == 1


class TestMemoization:
    def test_same_dataset_reuses_result(self, metrics, dataset):
        first = metrics.latest_audit(dataset)
        assert metrics.latest_audit(dataset) is first

    def test_new_dataset_recomputes(self, metrics, dataset):
        assert metrics.total_decisions(dataset) == 40
        smaller = dataset.model_copy(update={"assemblies": dataset.assemblies[:1]})
        assert metrics.total_decisions(smaller) == 22
        assert metrics.total_decisions(dataset) == 40
