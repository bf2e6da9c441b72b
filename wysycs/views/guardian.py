"""Guardian profile: lookup by email, level progress, adopted forests, community."""

import streamlit as st

from ..forest_utils import (
    GUARDIAN_LEVELS,
    days_since_adoption,
    format_date,
    health_label,
    level_card_style,
    level_emoji,
)
from ..models import Guardian, GuardianProgress
from ..profile import leaderboard_rows, load_community, load_guardian_profile
from .common import (
    PAGE_DASHBOARD,
    PAGE_FOREST_DETAIL,
    ViewContext,
    navigate,
    render_header,
    render_health_bar,
)


def _reset_profile() -> None:
    st.session_state.guardian_lookup = None
    st.session_state.guardian_email = ""


def _render_lookup_form(ctx: ViewContext) -> None:
    t = ctx.t
    st.markdown(f"### 🛡️ {t('guardian.profile.title')}")
    st.caption(t("guardian.profile.description"))

    lookup = st.session_state.guardian_lookup
    if lookup is not None and lookup.error:
        st.error(lookup.error)

    with st.form("guardian-lookup"):
        email = st.text_input(
            t("guardian.profile.email"),
            value=st.session_state.guardian_email,
            placeholder=t("guardian.profile.emailPlaceholder"),
        )
        submitted = st.form_submit_button(t("guardian.profile.viewProfile"))

    if submitted:
        st.session_state.guardian_email = email
        with st.spinner(t("guardian.profile.searching")):
            st.session_state.guardian_lookup = load_guardian_profile(ctx.client, email, t)
        st.rerun()


def _render_progress(ctx: ViewContext, progress: GuardianProgress) -> None:
    t = ctx.t
    st.markdown(f"#### 🎯 {t('guardian.progress.title')}")
    current = progress.current_level
    st.markdown(f"**{current.emoji} {current.name}** · {current.points} {t('guardian.progress.points')}")

    if progress.at_max_level:
        st.success("🏆 " + t("guardian.progress.maxLevel"))
        return

    nxt = progress.next_level
    st.caption(
        f"{t('guardian.progress.next')}: {nxt.name} · "
        f"{t('guardian.progress.missing')} {nxt.points_needed} {t('guardian.progress.points')}"
    )
    st.progress(
        min(max(float(nxt.progress_percentage) / 100.0, 0.0), 1.0),
        text=f"{t('guardian.progress.progress')} {nxt.progress_percentage}%",
    )


def _render_adopted_forests(ctx: ViewContext, guardian: Guardian) -> None:
    t = ctx.t
    st.markdown(f"#### 🌳 {t('guardian.forests.title')}")
    if not guardian.adopted_forests:
        st.info(t("guardian.forests.empty"))
        return

    for adoption in guardian.adopted_forests:
        forest = adoption.forest
        nasa = adoption.health_nasa
        health = nasa.health_percentage if nasa and nasa.health_percentage is not None else (forest.health if forest else None)
        with st.container(border=True):
            st.markdown(f"**{forest.name if forest else adoption.forest_id}**")
            if forest:
                st.caption(f"{forest.community} · {forest.co2_capture}")
            value = f"{health}%" if health is not None else "—"
            st.markdown(f"{t('guardian.forests.health')}: **{value}** · {health_label(health, t)}")
            render_health_bar(health)
            if nasa and nasa.ndvi_value is not None:
                source = t("guardian.forests.realData") if nasa.is_real_data else t("guardian.forests.estimated")
                st.caption(f"NDVI {nasa.ndvi_value} · {nasa.source} · {source}")
            st.caption(
                t(
                    "guardian.forests.adoptedOn",
                    date=format_date(adoption.adoption_date, t.locale),
                    days=days_since_adoption(adoption.adoption_date),
                )
            )
            st.button(
                t("guardian.forests.viewDetail"),
                key=f"adopted-forest-{adoption.id}",
                on_click=navigate,
                args=(PAGE_FOREST_DETAIL,),
                kwargs={"selected_forest_id": adoption.forest_id},
            )


def _render_profile(ctx: ViewContext, guardian: Guardian, progress: GuardianProgress) -> None:
    t = ctx.t
    header, action = st.columns([4, 1])
    with header:
        st.markdown(f"### 🛡️ {guardian.guardian_name or t('guardian.defaultName')}")
        st.caption(guardian.guardian_email)
    with action:
        st.button(t("guardian.profile.changeGuardian"), on_click=_reset_profile)

    level = guardian.guardian_level or GUARDIAN_LEVELS[0]
    col1, col2, col3 = st.columns(3)
    col1.metric(t("guardian.stats.adoptedForests"), guardian.total_forests)
    col2.metric(t("guardian.stats.totalPoints"), guardian.total_points or 0)
    with col3:
        st.markdown(
            f'<div style="{level_card_style(level)}">{t("guardian.stats.level")}<br>'
            f"<b>{level_emoji(level)} {level}</b></div>",
            unsafe_allow_html=True,
        )

    if progress is not None:
        _render_progress(ctx, progress)

    _render_adopted_forests(ctx, guardian)


def _render_community(ctx: ViewContext) -> None:
    t = ctx.t
    leaderboard, stats = load_community(ctx.client, ctx.config.leaderboard_limit)

    if stats is not None:
        st.markdown(f"#### 🌎 {t('guardian.community.title')}")
        col1, col2, col3 = st.columns(3)
        col1.metric(t("guardian.community.totalAdoptions"), stats.total_adoptions)
        col2.metric(t("guardian.community.activeGuardians"), stats.total_guardians)
        col3.metric(t("guardian.community.alertsSent"), stats.total_alerts_sent)

        if stats.level_distribution:
            st.markdown(f"**{t('guardian.community.levelDistribution')}**")
            for level in GUARDIAN_LEVELS:
                st.caption(f"{level_emoji(level)} {level}: {stats.level_distribution.get(level, 0)}")

    if leaderboard is not None:
        st.markdown(f"#### 🏆 {t('guardian.leaderboard.title')}")
        if not leaderboard.entries:
            st.info(t("guardian.leaderboard.empty"))
        lookup = st.session_state.guardian_lookup
        current_email = lookup.guardian.guardian_email if lookup is not None and lookup.found else None
        rows = leaderboard_rows(leaderboard, t, current_email)
        if rows:
            st.dataframe(rows, use_container_width=True, hide_index=True)
        st.caption(t("guardian.leaderboard.total", count=leaderboard.total_guardians))


def render(ctx: ViewContext) -> None:
    t = ctx.t
    st.button("← " + t("guardian.profile.backToDashboard"), on_click=navigate, args=(PAGE_DASHBOARD,))
    render_header(t("guardian.title"), t("guardian.description"))

    lookup = st.session_state.guardian_lookup
    main_col, side_col = st.columns([2, 1])
    with main_col:
        if lookup is not None and lookup.found:
            _render_profile(ctx, lookup.guardian, lookup.progress)
        else:
            _render_lookup_form(ctx)
    with side_col:
        _render_community(ctx)
