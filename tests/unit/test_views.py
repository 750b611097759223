"""Tests for the API views and the load-state gate."""

import pytest

from app.container import container
from app.models.common import LoadState
from app.services.selection import SelectionState
from web.api.assemblies import get_assemblies
from web.api.audits import get_audits
from web.api.charter import get_charter
from web.api.errors import DatasetNotReadyError, require_dataset
from web.api.modules import get_modules
from web.api.overview import get_overview
from web.api.participation import get_participation
from web.api.schemas import EmptyPanel


@pytest.fixture(autouse=True)
def init_container():
    container.init()


@pytest.fixture
def ready(dataset):
    return LoadState.ready(dataset)


class TestGate:
    def test_pending(self):
        with pytest.raises(DatasetNotReadyError, match="not loaded"):
            require_dataset(LoadState.pending())

    def test_failed(self):
        with pytest.raises(DatasetNotReadyError, match="boom"):
            require_dataset(LoadState.failed("boom"))

    def test_ready(self, ready, dataset):
        assert require_dataset(ready) is dataset

    @pytest.mark.parametrize("view", [get_overview, get_charter, get_audits, get_participation])
    def test_views_gated(self, view):
        with pytest.raises(DatasetNotReadyError):
            view(LoadState.pending())

    def test_selection_views_gated(self):
        with pytest.raises(DatasetNotReadyError):
            get_assemblies(LoadState.failed("boom"), SelectionState())
        with pytest.raises(DatasetNotReadyError):
            get_modules(LoadState.failed("boom"), SelectionState())


class TestViews:
    def test_overview(self, ready):
        resp = get_overview(ready)
        assert [c.label for c in resp.cards] == [
            "Assemblies active",
            "Decisions issued",
            "Modules deployed",
            "Registered voters",
        ]
        assert [p.id for p in resp.pillars] == ["transparency", "participation"]
        assert [p.year for p in resp.audit_series] == [2026, 2027]
        assert resp.funding[0].value == "$4.2M"

    def test_charter(self, ready):
        resp = get_charter(ready)
        assert resp.title == "Civic AI Charter"
        assert [(p.number, p.text) for p in resp.pillars[0].principles] == [
            (1, "Publish model cards."),
            (2, "Log automated decisions."),
        ]

    def test_assemblies_empty_panel(self, ready):
        resp = get_assemblies(ready, SelectionState(assembly_id="gone"))
        assert isinstance(resp.detail, EmptyPanel)
        assert not any(i.selected for i in resp.items)

    def test_assemblies_detail(self, ready):
        resp = get_assemblies(ready, SelectionState(assembly_id="housing"))
        assert resp.detail.name == "Housing Assembly"
        assert resp.detail.demographics[0].value == "31%"

    def test_modules_detail(self, ready):
        resp = get_modules(ready, SelectionState(module_id="assembly-engine"))
        assert resp.detail.metrics[0].value == "2K"
        assert resp.items[0].selected

    def test_modules_empty_panel(self, ready):
        assert isinstance(get_modules(ready, SelectionState()).detail, EmptyPanel)

    def test_audits(self, ready):
        resp = get_audits(ready)
        assert resp.cards[-1].value == "100%"
        assert len(resp.series) == 2

    def test_audits_empty_timeline(self, dataset):
        state = LoadState.ready(dataset.model_copy(update={"audit_timeline": ()}))
        resp = get_audits(state)
        assert resp.series == []
        assert {c.value for c in resp.cards} == {"N/A"}

    def test_participation(self, ready):
        resp = get_participation(ready)
        assert resp.satisfaction.value == "3.9"
        assert [p.turnout for p in resp.series] == [92, 87]
        assert resp.equity[0].band == "good"
