"""Dashboard service - projects dataset, metrics and selection into display shapes."""

from loguru import logger

from app.models.dashboard import (
    AssemblyCard,
    AssemblyDetail,
    DemographicTile,
    EquityTile,
    MetricRow,
    ModuleCard,
    ModuleDetail,
    NoSelection,
    ParticipationPoint,
    ScoreGauge,
    StatCard,
)
from app.models.governance import Dataset, GovModuleSchema, NumberMetric, tag_metric
from app.services.metrics import MetricsService, resolution_rate
from app.services.selection import SelectionState
from helpers import formulas
from settings import (
    ASSEMBLY_NAME_SUFFIX,
    DESCRIPTION_PREVIEW_LENGTH,
    METRIC_COMPACT_THRESHOLD,
    NOT_AVAILABLE,
)

ASSEMBLY_PROMPT = "Select an assembly to explore its details and demographics."
MODULE_PROMPT = "Select a module to explore its features, tech stack, and live metrics."

SATISFACTION_SCALE = 5.0


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def metric_display(raw: bool | int | float | str) -> str:
    """Numbers over the threshold are compacted, everything else is shown as-is."""
    metric = tag_metric(raw)
    if isinstance(metric, NumberMetric):
        if metric.value > METRIC_COMPACT_THRESHOLD:
            return formulas.format_compact(metric.value)
        return formulas.format_number(metric.value)
    return metric.value


class DashboardService:
    """Dashboard business logic."""

    def __init__(self, metrics: MetricsService):
        self._metrics = metrics
        logger.debug("DashboardService initialized")

    # ========== SUMMARY CARDS ==========

    def overview_cards(self, dataset: Dataset) -> list[StatCard]:
        """Headline cards for the overview tab."""
        avg_binding = self._metrics.average_binding_rate(dataset)
        binding = formulas.format_percent(avg_binding) if avg_binding is not None else NOT_AVAILABLE
        participation = dataset.participation

        return [
            StatCard("Assemblies active", str(len(dataset.assemblies))),
            StatCard(
                "Decisions issued",
                str(self._metrics.total_decisions(dataset)),
                f"{binding} binding",
            ),
            StatCard(
                "Modules deployed",
                str(self._metrics.ga_module_count(dataset)),
                f"of {len(dataset.modules)} total",
            ),
            StatCard(
                "Registered voters",
                formulas.format_compact(participation.registered),
                f"of {formulas.format_compact(participation.total_residents)}",
            ),
        ]

    def audit_cards(self, dataset: Dataset) -> list[StatCard]:
        """Cards for the latest audit year; every value degrades to N/A without one."""
        latest = self._metrics.latest_audit(dataset)
        if latest is None:
            return [
                StatCard("Current coverage", NOT_AVAILABLE),
                StatCard("Systems tracked", NOT_AVAILABLE),
                StatCard("Incidents (latest yr)", NOT_AVAILABLE),
                StatCard("Resolution rate", NOT_AVAILABLE),
            ]

        return [
            StatCard("Current coverage", f"{formulas.format_number(latest.audited)}%"),
            StatCard("Systems tracked", str(latest.total)),
            StatCard("Incidents (latest yr)", str(latest.incidents), f"{latest.resolved} resolved"),
            StatCard("Resolution rate", formulas.format_percent(resolution_rate(latest))),
        ]

    def participation_cards(self, dataset: Dataset) -> list[StatCard]:
        """Cards for the participation tab."""
        p = dataset.participation
        return [
            StatCard(
                "Registered",
                formulas.format_compact(p.registered),
                f"of {formulas.format_compact(p.total_residents)}",
            ),
            StatCard("Active voters", formulas.format_compact(p.active_voters)),
            StatCard("Avg turnout", formulas.format_percent(p.avg_turnout_rate)),
            StatCard("Quadratic votes (Q)", formulas.format_compact(p.quadratic_votes_last_quarter)),
        ]

    def satisfaction(self, dataset: Dataset) -> ScoreGauge:
        """Satisfaction index on its native 0-5 scale."""
        value = dataset.participation.satisfaction_index
        return ScoreGauge(
            "Satisfaction Index",
            formulas.format_number(value),
            _clamp(value / SATISFACTION_SCALE),
        )

    def accessibility(self, dataset: Dataset) -> ScoreGauge:
        """Accessibility score (stored as a fraction) shown as percent."""
        value = dataset.participation.accessibility_score
        return ScoreGauge("Accessibility Score", formulas.format_percent(value), _clamp(value))

    def equity_tiles(self, dataset: Dataset) -> list[EquityTile]:
        """Demographic equity index per group, in document order."""
        return [
            EquityTile(
                key=group,
                label=formulas.humanize(group),
                value=formulas.fixed(value, 2),
                band=formulas.equity_band(value),
                fill=_clamp(value),
            )
            for group, value in dataset.participation.demographic_equity.items()
        ]

    # ========== CHART SERIES ==========

    def audit_series(self, dataset: Dataset) -> list[dict]:
        """Audit timeline as chart rows, unmodified."""
        return [a.model_dump() for a in dataset.audit_timeline]

    def participation_series(self, dataset: Dataset) -> list[ParticipationPoint]:
        """Members and whole-percent turnout per assembly."""
        return [
            ParticipationPoint(
                name=a.name.replace(ASSEMBLY_NAME_SUFFIX, "", 1),
                members=a.members,
                turnout=formulas.whole_percent(a.avg_turnout),
            )
            for a in dataset.assemblies
        ]

    # ========== ASSEMBLIES ==========

    def assembly_cards(self, dataset: Dataset, selection: SelectionState) -> list[AssemblyCard]:
        """List view of all assemblies with the selected one flagged."""
        return [
            AssemblyCard(
                id=a.id,
                name=a.name,
                domain=a.domain,
                members=a.members,
                decisions=a.decisions_issued,
                binding=formulas.format_percent(a.binding_rate),
                turnout=formulas.format_percent(a.avg_turnout),
                selected=a.id == selection.assembly_id,
            )
            for a in dataset.assemblies
        ]

    def assembly_detail(self, dataset: Dataset, selection: SelectionState) -> AssemblyDetail | NoSelection:
        """Detail panel for the selected assembly. Unknown ids count as no selection."""
        assembly = next((a for a in dataset.assemblies if a.id == selection.assembly_id), None)
        if assembly is None:
            if selection.assembly_id is not None:
                logger.debug("Stale assembly selection: {}", selection.assembly_id)
            return NoSelection(ASSEMBLY_PROMPT)

        d = assembly.demographics
        tiles = [
            ("18–34", d.age_18_34),
            ("35–54", d.age_35_54),
            ("55+", d.age_55_plus),
            ("Female", d.female),
            ("Male", d.male),
            ("Non-binary", d.nonbinary),
        ]

        return AssemblyDetail(
            id=assembly.id,
            name=assembly.name,
            domain=assembly.domain,
            next_session=assembly.next_session,
            members=assembly.members,
            decisions=assembly.decisions_issued,
            turnout=formulas.format_percent(assembly.avg_turnout),
            stipend=f"${formulas.format_number(assembly.stipend_per_session)}",
            demographics=[DemographicTile(label, f"{formulas.format_number(v)}%") for label, v in tiles],
        )

    # ========== MODULES ==========

    def module_cards(self, dataset: Dataset, selection: SelectionState) -> list[ModuleCard]:
        """List view of all modules with the selected one flagged."""
        cards = []
        for m in dataset.modules:
            preview = m.description
            if len(preview) > DESCRIPTION_PREVIEW_LENGTH:
                preview = preview[:DESCRIPTION_PREVIEW_LENGTH] + "…"
            cards.append(
                ModuleCard(
                    id=m.id,
                    title=m.title,
                    badge=f"{m.status} v{m.version}",
                    is_ga=m.is_ga,
                    preview=preview,
                    selected=m.id == selection.module_id,
                )
            )
        return cards

    def module_metrics(self, module: GovModuleSchema) -> list[MetricRow]:
        """Humanized metric rows in document order."""
        return [MetricRow(formulas.humanize(k), metric_display(v)) for k, v in module.metrics.items()]

    def module_detail(self, dataset: Dataset, selection: SelectionState) -> ModuleDetail | NoSelection:
        """Detail panel for the selected module. Unknown ids count as no selection."""
        module = next((m for m in dataset.modules if m.id == selection.module_id), None)
        if module is None:
            if selection.module_id is not None:
                logger.debug("Stale module selection: {}", selection.module_id)
            return NoSelection(MODULE_PROMPT)

        return ModuleDetail(
            id=module.id,
            title=module.title,
            description=module.description,
            badge=f"{module.status} v{module.version}",
            is_ga=module.is_ga,
            features=list(module.features),
            tech_stack=module.tech_stack,
            metrics=self.module_metrics(module),
        )
