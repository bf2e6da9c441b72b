"""
Streamlit entry point.

Run with ``streamlit run wysycs/app.py`` or the ``wysycs`` console script.
"""

import logging

import streamlit as st
from dotenv import load_dotenv

from wysycs.config import configure_logging
from wysycs.views import PAGES, ViewContext
from wysycs.views.common import (
    PAGE_DASHBOARD,
    PAGE_FIRES,
    PAGE_GUARDIAN,
    PAGE_LANDING,
    get_client,
    get_config,
    get_translator,
    init_session_state,
    navigate,
    render_language_switcher,
)

logger = logging.getLogger(__name__)

NAV_ITEMS = [
    (PAGE_LANDING, "🏠", "nav.home"),
    (PAGE_DASHBOARD, "🌳", "nav.dashboard"),
    (PAGE_FIRES, "🔥", "nav.fires"),
    (PAGE_GUARDIAN, "🛡️", "nav.guardian"),
]


def render_sidebar(t) -> None:
    with st.sidebar:
        st.markdown("## 🌳 WYSYCS")
        st.caption(t("nav.subtitle"))
        render_language_switcher()
        st.divider()
        for page, icon, key in NAV_ITEMS:
            st.button(
                f"{icon} {t(key)}",
                key=f"nav-{page}",
                use_container_width=True,
                type="primary" if st.session_state.page == page else "secondary",
                on_click=navigate,
                args=(page,),
            )
        st.divider()
        st.caption(t("nav.dataSource"))


def main():
    st.set_page_config(page_title="WYSYCS", page_icon="🌳", layout="wide")

    load_dotenv()
    config = get_config()
    configure_logging(config.log_level)

    init_session_state(config)
    t = get_translator()
    render_sidebar(t)

    ctx = ViewContext(
        config=config,
        client=get_client(config.api_base_url, config.timeout),
        t=t,
    )

    page = st.session_state.page
    renderer = PAGES.get(page)
    if renderer is None:
        logger.warning(f"Unknown page '{page}', showing landing")
        st.session_state.page = PAGE_LANDING
        renderer = PAGES[PAGE_LANDING]
    renderer(ctx)


if __name__ == "__main__":
    main()
