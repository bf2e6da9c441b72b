"""Forest detail: health, facts, fire risk and adoption."""

import html

import streamlit as st
from streamlit_folium import st_folium

from ..adoption import AdoptionForm, submit_adoption
from ..forest_utils import coordinates_label, format_date, health_color
from ..maps import build_forest_map
from ..risk import analyze_location, risk_colors
from .common import (
    PAGE_DASHBOARD,
    PAGE_GUARDIAN,
    ViewContext,
    health_badge_html,
    load_forest,
    navigate,
    render_health_bar,
)


def _render_fire_risk(ctx: ViewContext, forest) -> None:
    t = ctx.t
    st.markdown(f"#### 🔥 {t('forest.risk.title')}")

    cached = st.session_state.forest_risk.get(str(forest.id))
    label = t("forest.risk.refresh") if cached else t("forest.risk.analyze")

    if st.button(label, key=f"forest-risk-{forest.id}"):
        with st.spinner(t("forest.risk.analyzing")):
            analysis = analyze_location(
                ctx.client,
                forest.latitude,
                forest.longitude,
                ctx.config.forest_risk_radius_km,
                ctx.config.fire_days,
            )
        if analysis is None:
            st.error(t("fires.risk.error"))
        else:
            st.session_state.forest_risk[str(forest.id)] = analysis.risk_assessment
            cached = analysis.risk_assessment

    if cached is None:
        st.caption(t("forest.risk.description"))
        return

    color = cached.color or risk_colors(cached.level)[0]
    closest = ""
    if cached.closest_fire_km:
        closest = f"<br>{t('fires.risk.closest', km=f'{cached.closest_fire_km:.2f}')}"
    st.markdown(
        f'<div style="background:{color}20; border-left:4px solid {color}; padding:12px; border-radius:6px;">'
        f'<span style="background:{color}; color:white; padding:2px 8px; border-radius:4px;">'
        f"{html.escape(cached.level)}</span> "
        f"{t('forest.risk.detected', count=cached.fires_detected)}"
        f"<p>{html.escape(cached.description)}</p>{closest}</div>",
        unsafe_allow_html=True,
    )


def _render_adoption(ctx: ViewContext, forest) -> None:
    t = ctx.t
    st.markdown(f"#### 💚 {t('adoption.title')}")

    if st.session_state.adoption_success == forest.id:
        st.success(t("adoption.success", forest=forest.name))
        st.button(
            t("adoption.viewProfile"),
            on_click=navigate,
            args=(PAGE_GUARDIAN,),
            kwargs={"adoption_success": None},
        )
        return

    st.caption(t("adoption.description"))
    with st.form(f"adopt-{forest.id}", clear_on_submit=False):
        name = st.text_input(t("adoption.name") + " *", placeholder=t("adoption.namePlaceholder"))
        email = st.text_input(t("adoption.email") + " *", placeholder="guardian@email.com")
        telegram = st.text_input(t("adoption.telegram"), help=t("adoption.telegramHelp"))
        submitted = st.form_submit_button("💚 " + t("adoption.submit"))

    if not submitted:
        return

    form = AdoptionForm(guardian_name=name, guardian_email=email, telegram_chat_id=telegram)
    with st.spinner(t("adoption.submitting")):
        outcome = submit_adoption(ctx.client, forest.id, form, t)

    if outcome.success:
        st.session_state.adoption_success = forest.id
        st.session_state.guardian_email = outcome.guardian_email
        st.session_state.guardian_lookup = None
        st.rerun()
    else:
        st.error(outcome.error)


def render(ctx: ViewContext) -> None:
    t = ctx.t
    st.button("← " + t("forest.back"), on_click=navigate, args=(PAGE_DASHBOARD,))

    forest_id = st.session_state.selected_forest_id
    if forest_id is None:
        st.info(t("forest.notSelected"))
        return

    with st.spinner(t("common.loading")):
        forest = load_forest(ctx.client, forest_id)

    if forest is None:
        st.error(t("forest.notFound"))
        return

    st.title(f"🌳 {forest.name}")
    st.caption(f"📍 {coordinates_label(forest.latitude, forest.longitude)} · {forest.community}")

    info_col, map_col = st.columns([3, 2])
    with info_col:
        col1, col2, col3 = st.columns(3)
        with col1:
            st.markdown(
                f'<h2 style="color:{health_color(forest.health)}; margin:0">{forest.health or 0}%</h2>',
                unsafe_allow_html=True,
            )
            st.caption(t("forest.health"))
        col2.metric(t("forest.co2"), forest.co2_capture)
        col3.metric(t("forest.speciesCount"), forest.species_count)
        st.markdown(health_badge_html(forest.health, t), unsafe_allow_html=True)

        if forest.health_nasa and forest.health_nasa.ndvi_value is not None:
            nasa = forest.health_nasa
            st.caption(f"NDVI {nasa.ndvi_value} · {nasa.status} · {nasa.source} · {nasa.last_update}")

        if forest.fun_facts:
            st.markdown(f"#### ✨ {t('forest.facts')}")
            for fact in forest.fun_facts:
                st.markdown(f"- {fact}")

        _render_fire_risk(ctx, forest)
        _render_adoption(ctx, forest)

    with map_col:
        st.markdown(f"#### 🗺️ {t('forest.map')}")
        st.caption(coordinates_label(forest.latitude, forest.longitude, decimals=4))
        forest_map = build_forest_map([forest], center=(forest.latitude, forest.longitude), zoom=10)
        st_folium(forest_map, height=380, use_container_width=True, returned_objects=[])

        st.markdown(f"#### {t('forest.status')}")
        st.markdown(f"**{forest.health or 0}%**")
        render_health_bar(forest.health)
        if forest.created_at:
            st.caption(f"{t('forest.registered')}: {format_date(forest.created_at, t.locale)}")
