"""Fires page: regional detections, heatmap with spread prediction, risk analysis."""

import html
import logging

import streamlit as st
from streamlit_folium import st_folium

from ..maps import (
    VIEW_SATELLITE,
    VIEW_STREET,
    build_fire_heatmap,
    build_risk_map,
    fires_in_bounds,
    nearest_fire,
    prediction_day_labels,
    prediction_details_html,
)
from ..models import RiskAnalysis
from ..risk import analyze_location, load_test_locations, parse_custom_search, risk_colors
from ..stats import compute_fire_stats, confidence_label, fires_to_dataframe
from .common import ViewContext, load_fires, load_prediction, render_header

logger = logging.getLogger(__name__)


def _run_analysis(ctx: ViewContext, lat: float, lon: float, radius_km: int) -> None:
    with st.spinner(ctx.t("fires.risk.analyzing")):
        analysis = analyze_location(ctx.client, lat, lon, radius_km, st.session_state.fire_days)
    st.session_state.risk_analysis = analysis
    st.session_state.risk_query = (lat, lon, radius_km) if analysis else None
    if analysis is None:
        st.error(ctx.t("fires.risk.error"))


def _render_prediction_panel(ctx: ViewContext) -> None:
    t = ctx.t
    selected = st.session_state.selected_fire
    st.markdown(f"#### 🔥 {t('fires.prediction.title')}")

    if selected is None:
        st.caption(t("fires.prediction.clickHint"))
        return

    lat, lng = selected
    st.caption(f"{lat:.3f}, {lng:.3f}")
    with st.spinner(t("fires.prediction.loading")):
        prediction = load_prediction(ctx.client, lat, lng)

    if prediction is None:
        st.error(t("fires.prediction.error"))
        return
    if not prediction.predictions:
        st.info(t("fires.prediction.empty"))
        return

    labels = prediction_day_labels(prediction.predictions, t)
    index = st.radio(
        t("fires.prediction.days"),
        options=list(range(len(labels))),
        format_func=lambda i: labels[i],
        index=None,
        horizontal=True,
        key=f"prediction-day-{lat}-{lng}",
    )
    if index is None:
        st.caption(t("fires.prediction.selectDay"))
        return

    st.markdown(prediction_details_html(prediction.predictions[index], t), unsafe_allow_html=True)


def _render_alerts_tab(ctx: ViewContext, fires) -> None:
    t = ctx.t
    config = ctx.config

    st.radio(
        t("fires.map.view"),
        options=[VIEW_SATELLITE, VIEW_STREET],
        format_func=lambda mode: t(f"fires.map.{mode}"),
        horizontal=True,
        key="view_mode",
    )

    map_col, panel_col = st.columns([3, 1])
    with map_col:
        heatmap = build_fire_heatmap(
            fires,
            center=config.map_center,
            zoom=config.map_zoom,
            radius=config.heatmap_radius,
            view_mode=st.session_state.view_mode,
            translator=t,
        )
        result = st_folium(
            heatmap,
            height=520,
            use_container_width=True,
            returned_objects=["last_object_clicked", "bounds"],
            key="fire-heatmap",
        ) or {}

        clicked = result.get("last_object_clicked")
        if clicked:
            fire = nearest_fire(fires, clicked["lat"], clicked["lng"])
            if fire is not None:
                st.session_state.selected_fire = (fire.latitude, fire.longitude)

        visible = fires_in_bounds(fires, result.get("bounds"))
        st.caption(t("fires.map.visible", visible=len(visible), total=len(fires)))

    with panel_col:
        _render_prediction_panel(ctx)

    st.markdown(f"### {t('fires.alerts.activeFires')} ({len(fires)})")
    if not fires:
        st.info(t("fires.alerts.none"))
        return

    df = fires_to_dataframe(fires[: config.max_fire_rows])
    df["confidence"] = df["confidence"].map(lambda c: confidence_label(c, t))
    df = df.rename(columns={
        "latitude": t("fires.table.latitude"),
        "longitude": t("fires.table.longitude"),
        "brightness": t("fires.table.brightness"),
        "confidence": t("fires.table.confidence"),
        "acquired_date": t("fires.table.date"),
        "acquired_time": t("fires.table.time"),
    })
    st.dataframe(df, use_container_width=True, hide_index=True)

    if len(fires) > config.max_fire_rows:
        st.caption(t("fires.table.showingOf", shown=config.max_fire_rows, total=len(fires)))


def render_risk_result(ctx: ViewContext, analysis: RiskAnalysis) -> None:
    """Assessment card, recommendations, nearby fires and risk map."""
    t = ctx.t
    assessment = analysis.risk_assessment
    border, background = risk_colors(assessment.level)

    closest = ""
    if assessment.closest_fire_km is not None:
        closest = f"<br>{t('fires.risk.closest', km=f'{assessment.closest_fire_km:.2f}')}"

    st.markdown(
        f'<div style="border:2px solid {border}; background:{background}; border-radius:8px; padding:16px;">'
        f"<h4 style=\"margin:0\">{html.escape(assessment.level)}</h4>"
        f"<p>{html.escape(assessment.description)}</p>"
        f"<b>{t('fires.risk.detected', count=assessment.fires_detected)}</b>{closest}"
        f"</div>",
        unsafe_allow_html=True,
    )

    if analysis.recommendations:
        st.markdown(f"**{t('fires.risk.recommendations')}**")
        for item in analysis.recommendations:
            st.markdown(f"- {item}")

    query = st.session_state.get("risk_query")
    if analysis.fires:
        st.markdown(f"**{t('fires.risk.nearbyFires')}**")
        rows = [
            {
                t("fires.table.latitude"): f.latitude,
                t("fires.table.longitude"): f.longitude,
                t("fires.table.brightness"): f.brightness,
                t("fires.table.confidence"): confidence_label(f.confidence, t),
                t("fires.table.distance"): f.distance_km,
            }
            for f in analysis.fires
        ]
        st.dataframe(rows, use_container_width=True, hide_index=True)

    if query:
        lat, lon, radius_km = query
        st_folium(build_risk_map(analysis, lat, lon, radius_km), height=380, use_container_width=True, returned_objects=[])


def _render_risk_tab(ctx: ViewContext) -> None:
    t = ctx.t
    config = ctx.config

    st.markdown(f"### {t('fires.risk.quickTitle')}")
    locations = load_test_locations(config.test_locations)
    columns = st.columns(len(locations)) if locations else []
    for col, location in zip(columns, locations):
        with col:
            st.markdown(f"**📍 {location.name}**")
            st.caption(location.desc)
            if st.button(t("fires.risk.analyze"), key=f"quick-{location.name}"):
                _run_analysis(ctx, location.lat, location.lon, config.quick_analysis_radius_km)

    st.markdown(f"### {t('fires.risk.customTitle')}")
    with st.form("custom-risk-search"):
        c1, c2, c3 = st.columns(3)
        lat = c1.text_input(t("fires.risk.latitude"), placeholder="-8.3")
        lon = c2.text_input(t("fires.risk.longitude"), placeholder="-75.6")
        radius = c3.text_input(t("fires.risk.radius"), value=str(config.risk_radius_km))
        submitted = st.form_submit_button("🔍 " + t("fires.risk.search"))

    if submitted:
        query = parse_custom_search(lat, lon, radius, default_radius_km=config.risk_radius_km)
        if query is not None:
            _run_analysis(ctx, *query)
        elif lat.strip() and lon.strip():
            st.warning(t("fires.risk.invalidInput"))

    analysis = st.session_state.risk_analysis
    if analysis is not None:
        render_risk_result(ctx, analysis)


def render(ctx: ViewContext) -> None:
    t = ctx.t
    render_header(t("fires.title"), t("fires.description"))

    st.radio(
        t("fires.period.title"),
        options=ctx.config.fire_day_options,
        format_func=lambda d: f"{d} {t('fires.period.day') if d == 1 else t('fires.period.days')}",
        horizontal=True,
        key="fire_days",
    )

    with st.spinner(t("common.loading")):
        fires = load_fires(ctx.client, st.session_state.fire_days)

    stats = compute_fire_stats(fires)
    col1, col2, col3, col4 = st.columns(4)
    col1.metric(t("fires.kpis.totalFires"), stats.total_fires, help=t("fires.kpis.detected"))
    col2.metric(t("fires.kpis.highConfidence"), stats.high_confidence_fires, help=t("fires.kpis.confirmed"))
    col3.metric(t("fires.kpis.averageBrightness"), f"{stats.average_brightness} K", help=t("fires.kpis.temperature"))
    col4.metric(t("fires.kpis.dataSource"), "NASA VIIRS", help=t("fires.kpis.satellite"))

    if stats.high_confidence_fires > 0:
        st.error(
            f"⚠️ {stats.high_confidence_fires} {t('fires.alerts.highConfidence')} "
            f"{t('fires.alerts.requireMonitoring')}"
        )

    alerts_tab, risk_tab = st.tabs(["🔥 " + t("fires.tabs.alerts"), "📊 " + t("fires.tabs.risk")])
    with alerts_tab:
        _render_alerts_tab(ctx, fires)
    with risk_tab:
        _render_risk_tab(ctx)
