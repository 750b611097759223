"""GovernanceOS Civic Governance Dashboard."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from app.models.common import LoadState, LoadStatus  # noqa: E402
from app.services.selection import SelectionState, Tab, select_tab, toggle_assembly, toggle_module  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api import assemblies, audits, charter, modules, overview, participation  # noqa: E402
from web.api.schemas import EmptyPanel  # noqa: E402

# Ensure container is initialized
setup_logging(level="INFO", to_file=True)
container.init()

st.set_page_config(page_title="GovernanceOS", page_icon="🏛️", layout="wide")

TABS = {
    Tab.OVERVIEW: "📊 Overview",
    Tab.CHARTER: "📜 Charter",
    Tab.ASSEMBLIES: "🗳️ Assemblies",
    Tab.MODULES: "🧩 Modules",
    Tab.AUDITS: "🔍 Audit Tracker",
    Tab.PARTICIPATION: "👥 Participation",
}

BAND_COLORS = {
    "excellent": "#10b981",
    "good": "#0ea5e9",
    "fair": "#f59e0b",
    "poor": "#f43f5e",
}

VIOLET = "#8b5cf6"
EMERALD = "#10b981"
ROSE = "#f43f5e"


@st.cache_resource(show_spinner=False)
def load_state() -> LoadState:
    """Load the dataset once per server process."""
    return container.loader.load()


def selection() -> SelectionState:
    if "selection" not in st.session_state:
        st.session_state.selection = SelectionState()
    return st.session_state.selection


def dispatch(reducer, *args) -> None:
    """Apply a selection transition."""
    st.session_state.selection = reducer(selection(), *args)


def on_tab_change() -> None:
    dispatch(select_tab, st.session_state.tab_radio)


def stat_cards(cards: list) -> None:
    cols = st.columns(len(cards))
    for col, card in zip(cols, cards):
        col.metric(card.label, card.value)
        if card.sub:
            col.caption(card.sub)


def area_chart(series: list, title: str) -> go.Figure:
    return go.Figure(
        go.Scatter(
            x=[p.year for p in series],
            y=[p.audited for p in series],
            fill="tozeroy",
            line=dict(color=VIOLET, width=2),
            name=title,
        )
    ).update_layout(yaxis=dict(range=[0, 100]), margin=dict(t=20, b=40, l=40, r=20), height=280)


def grouped_bar_chart(x: list, bars: list[tuple[str, list, str]]) -> go.Figure:
    fig = go.Figure(data=[go.Bar(name=name, x=x, y=y, marker_color=c) for name, y, c in bars])
    return fig.update_layout(barmode="group", margin=dict(t=20, b=40, l=40, r=20), height=260)


def overview_tab(state: LoadState):
    """Overview tab."""
    data = overview.get_overview(state)

    st.subheader("📊 Governance Overview")
    stat_cards(data.cards)

    st.subheader("Charter Pillars")
    cols = st.columns(3)
    for i, p in enumerate(data.pillars):
        with cols[i % 3]:
            st.markdown(f"{p.icon} **:violet[{p.title}]**")
            st.caption(p.description)

    st.subheader("AI Audit Coverage (10-Year Projection)")
    st.plotly_chart(area_chart(data.audit_series, "% High-Risk AI Audited"), width="stretch")

    st.subheader("Funding Stack")
    cols = st.columns(3)
    for i, f in enumerate(data.funding):
        with cols[i % 3]:
            st.metric(f.label, f.value)
            st.caption(f.sub)


def charter_tab(state: LoadState):
    """Charter tab."""
    data = charter.get_charter(state)

    st.subheader(f"📜 {data.title}")
    st.caption(data.purpose)

    for p in data.pillars:
        with st.expander(f"{p.icon} **{p.title}** — {p.description}", expanded=True):
            for pr in p.principles:
                st.write(f"{pr.number}. {pr.text}")

    st.success(f"**Enforcement:** {data.enforcement}")


def assemblies_tab(state: LoadState):
    """Assemblies tab."""
    data = assemblies.get_assemblies(state, selection())

    st.subheader("🗳️ Citizen Assemblies")
    cols = st.columns(3)
    for i, a in enumerate(data.items):
        with cols[i % 3]:
            st.button(
                f"{'✅ ' if a.selected else ''}{a.name}",
                key=f"assembly_{a.id}",
                on_click=dispatch,
                args=(toggle_assembly, a.id),
                width="stretch",
            )
            st.caption(f"{a.domain} · {a.members} members · {a.decisions} decisions · {a.binding} binding · {a.turnout} turnout")

    detail = data.detail
    if isinstance(detail, EmptyPanel):
        st.info(detail.prompt)
        return

    st.markdown(f"### {detail.name}")
    st.caption(f"{detail.domain} · Next session: {detail.next_session}")
    cols = st.columns(4)
    cols[0].metric("Members", detail.members)
    cols[1].metric("Decisions", detail.decisions)
    cols[2].metric("Turnout", detail.turnout)
    cols[3].metric("Stipend/session", detail.stipend)

    st.markdown("**Demographics**")
    cols = st.columns(len(detail.demographics))
    for col, d in zip(cols, detail.demographics):
        col.metric(d.label, d.value)


def modules_tab(state: LoadState):
    """Modules tab."""
    data = modules.get_modules(state, selection())

    st.subheader("🧩 Governance Modules")
    cols = st.columns(3)
    for i, m in enumerate(data.items):
        with cols[i % 3]:
            st.button(
                f"{'✅ ' if m.selected else ''}{m.title} ({m.badge})",
                key=f"module_{m.id}",
                on_click=dispatch,
                args=(toggle_module, m.id),
                width="stretch",
            )
            st.caption(m.preview)

    detail = data.detail
    if isinstance(detail, EmptyPanel):
        st.info(detail.prompt)
        return

    badge = f":green[{detail.badge}]" if detail.is_ga else f":orange[{detail.badge}]"
    st.markdown(f"### {detail.title} {badge}")
    st.caption(detail.description)

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Features**")
        for f in detail.features:
            st.write(f"• {f}")
        st.markdown("**Tech Stack**")
        st.caption(detail.tech_stack)
    with col2:
        st.markdown("**Metrics**")
        for row in detail.metrics:
            st.metric(row.label, row.value)


def audits_tab(state: LoadState):
    """Audit tracker tab."""
    data = audits.get_audits(state)

    st.subheader("🔍 AI Audit Tracker")
    stat_cards(data.cards)

    st.subheader("Audit Coverage Over Time")
    st.plotly_chart(area_chart(data.series, "% Audited"), width="stretch")

    st.subheader("Incident Timeline")
    years = [p.year for p in data.series]
    st.plotly_chart(
        grouped_bar_chart(
            years,
            [
                ("Incidents", [p.incidents for p in data.series], ROSE),
                ("Resolved", [p.resolved for p in data.series], EMERALD),
            ],
        ),
        width="stretch",
    )


def participation_tab(state: LoadState):
    """Participation tab."""
    data = participation.get_participation(state)

    st.subheader("👥 Participation & Equity")
    stat_cards(data.cards)

    st.subheader("Demographic Equity Index")
    st.caption("1.0 = perfect parity between demographic group participation and population share")
    cols = st.columns(4)
    for i, t in enumerate(data.equity):
        with cols[i % 4]:
            st.markdown(f"<h3 style='color:{BAND_COLORS[t.band]}'>{t.value}</h3>", unsafe_allow_html=True)
            st.caption(t.label)
            st.progress(t.fill)

    col1, col2 = st.columns(2)
    with col1:
        st.metric(data.satisfaction.label, data.satisfaction.value)
        st.caption("out of 5.0 — based on biannual resident surveys")
        st.progress(data.satisfaction.fill)
    with col2:
        st.metric(data.accessibility.label, data.accessibility.value)
        st.caption("Screen reader, multi-language, IVR, large print, offline support")
        st.progress(data.accessibility.fill)

    st.subheader("Assembly Participation Breakdown")
    st.plotly_chart(
        grouped_bar_chart(
            [p.name for p in data.series],
            [
                ("Members", [p.members for p in data.series], VIOLET),
                ("Turnout %", [p.turnout for p in data.series], EMERALD),
            ],
        ),
        width="stretch",
    )


RENDERERS = {
    Tab.OVERVIEW: overview_tab,
    Tab.CHARTER: charter_tab,
    Tab.ASSEMBLIES: assemblies_tab,
    Tab.MODULES: modules_tab,
    Tab.AUDITS: audits_tab,
    Tab.PARTICIPATION: participation_tab,
}


def main():
    st.caption("GOVERNANCEOS")
    st.title("🏛️ Civic Governance Dashboard")
    st.markdown("*Charter frameworks, citizen assemblies, governance modules, audit tracking, and participatory tools*")

    with st.spinner("Loading GovernanceOS…"):
        state = load_state()

    if state.status == LoadStatus.FAILED:
        st.error("Unable to load the governance dataset.")
        return
    if not state.is_ready:
        st.info("Loading GovernanceOS…")
        return

    current = selection()
    st.radio(
        "Section",
        list(TABS),
        index=list(TABS).index(current.tab),
        format_func=TABS.get,
        horizontal=True,
        key="tab_radio",
        on_change=on_tab_change,
        label_visibility="collapsed",
    )

    logger.debug("Rendering tab {}", selection().tab)
    RENDERERS[selection().tab](state)

    st.sidebar.markdown("---")
    st.sidebar.markdown("**GovernanceOS** · Clawcode Research")


if __name__ == "__main__":
    main()
