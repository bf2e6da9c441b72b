"""Landing page."""

import streamlit as st

from .common import PAGE_DASHBOARD, PAGE_FIRES, PAGE_GUARDIAN, ViewContext, navigate

FEATURES = [
    ("🛰️", "satellite"),
    ("🔥", "fires"),
    ("🌳", "adoption"),
    ("🏆", "gamification"),
]


def render(ctx: ViewContext) -> None:
    t = ctx.t

    st.markdown(
        f'<div style="text-align:center; padding:32px 0;">'
        f'<h1 style="font-size:3em; margin-bottom:0;">🌳 WYSYCS</h1>'
        f'<p style="font-size:1.3em;">{t("landing.tagline")}</p>'
        f'<p style="color:#6b7280;">{t("landing.description")}</p>'
        f"</div>",
        unsafe_allow_html=True,
    )

    _, center, _ = st.columns([1, 2, 1])
    with center:
        st.button(
            "🚀 " + t("landing.cta"),
            type="primary",
            use_container_width=True,
            on_click=navigate,
            args=(PAGE_DASHBOARD,),
        )

    st.markdown(f"### {t('landing.features.title')}")
    for col, (icon, name) in zip(st.columns(len(FEATURES)), FEATURES):
        with col:
            with st.container(border=True):
                st.markdown(f"#### {icon} {t(f'landing.features.{name}.title')}")
                st.caption(t(f"landing.features.{name}.description"))

    st.divider()
    left, right = st.columns(2)
    left.button("🔥 " + t("nav.fires"), use_container_width=True, on_click=navigate, args=(PAGE_FIRES,))
    right.button("🛡️ " + t("nav.guardian"), use_container_width=True, on_click=navigate, args=(PAGE_GUARDIAN,))
    st.caption(t("landing.footer"))
