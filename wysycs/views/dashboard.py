"""Forest dashboard: KPIs, health filter, map and forest list."""

import streamlit as st
from streamlit_folium import st_folium

from ..i18n import format_number
from ..maps import build_forest_map, fit_to_forests
from ..stats import HEALTH_FILTERS, compute_forest_stats, filter_forests, health_filter_counts
from .common import (
    PAGE_FOREST_DETAIL,
    ViewContext,
    health_badge_html,
    load_forests,
    navigate,
    render_header,
    render_health_bar,
)


def render(ctx: ViewContext) -> None:
    t = ctx.t
    render_header(t("dashboard.title"), t("dashboard.description"))

    if st.button("🔄 " + t("common.refresh")):
        st.cache_data.clear()

    with st.spinner(t("common.loading")):
        forests = load_forests(ctx.client)

    if not forests:
        st.info(t("dashboard.empty"))
        return

    stats = compute_forest_stats(forests)
    locale = t.locale

    col1, col2, col3, col4 = st.columns(4)
    col1.metric(t("dashboard.kpis.totalForests"), stats.total_forests, help=t("dashboard.kpis.monitored"))
    with col2:
        st.metric(t("dashboard.kpis.averageHealth"), f"{stats.average_health}%")
        render_health_bar(stats.average_health)
    col3.metric(
        t("dashboard.kpis.co2Captured"),
        f"{format_number(stats.total_co2, locale)} {t('dashboard.kpis.co2Unit')}",
        help=t("dashboard.kpis.annualCapture"),
    )
    col4.metric(
        t("dashboard.kpis.totalSpecies"),
        format_number(stats.total_species, locale),
        help=t("dashboard.kpis.biodiversity"),
    )

    if stats.critical_forests:
        st.warning(t("dashboard.alerts.critical", count=stats.critical_forests))

    counts = health_filter_counts(forests)
    health_filter = st.radio(
        t("dashboard.filter.title"),
        options=list(HEALTH_FILTERS),
        format_func=lambda name: f"{t('dashboard.tabs.' + name)} ({counts[name]})",
        horizontal=True,
        key="forest_filter",
    )
    filtered = filter_forests(forests, health_filter)

    map_tab, list_tab = st.tabs(["🗺️ " + t("dashboard.tabs.map"), "📋 " + t("dashboard.tabs.list")])

    with map_tab:
        forest_map = build_forest_map(filtered, ctx.config.map_center, ctx.config.map_zoom)
        fit_to_forests(forest_map, filtered)
        st_folium(forest_map, height=520, use_container_width=True, returned_objects=[])

    with list_tab:
        if not filtered:
            st.info(t("dashboard.noResults"))
        for forest in filtered:
            with st.container(border=True):
                left, right = st.columns([4, 1])
                with left:
                    st.markdown(f"**🌳 {forest.name}**")
                    st.caption(f"{forest.community} · {forest.co2_capture} · {forest.species_count} {t('forest.species')}")
                    st.markdown(health_badge_html(forest.health, t), unsafe_allow_html=True)
                with right:
                    st.button(
                        t("dashboard.viewDetail"),
                        key=f"forest-detail-{forest.id}",
                        on_click=navigate,
                        args=(PAGE_FOREST_DETAIL,),
                        kwargs={"selected_forest_id": forest.id},
                    )
