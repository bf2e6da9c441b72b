"""
Shared state, cached data loaders and widgets for the Streamlit views.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st

from ..api import APIConfig, APIError, WysycsAPIClient
from ..config import DashboardConfig, load_config
from ..forest_utils import health_summary
from ..i18n import LOCALE_NAMES, SUPPORTED_LOCALES, Translator
from ..models import Fire, FirePrediction, Forest

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 300

PAGE_LANDING = "landing"
PAGE_DASHBOARD = "dashboard"
PAGE_FIRES = "fires"
PAGE_GUARDIAN = "guardian"
PAGE_FOREST_DETAIL = "forest_detail"


@dataclass
class ViewContext:
    """What every page needs to render."""
    config: DashboardConfig
    client: WysycsAPIClient
    t: Translator


@st.cache_resource
def get_config() -> DashboardConfig:
    return load_config()


@st.cache_resource
def get_client(base_url: str, timeout: float) -> WysycsAPIClient:
    return WysycsAPIClient(APIConfig(base_url=base_url, timeout=timeout))


def init_session_state(config: DashboardConfig) -> None:
    """Set defaults once per browser session."""
    defaults = {
        "page": PAGE_LANDING,
        "locale": config.default_locale,
        "selected_forest_id": None,
        "forest_filter": "all",
        "fire_days": config.fire_days,
        "view_mode": "satellite",
        "selected_fire": None,
        "risk_analysis": None,
        "risk_query": None,
        "forest_risk": {},
        "guardian_email": "",
        "guardian_lookup": None,
        "adoption_success": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def navigate(page: str, **state) -> None:
    """Switch page, optionally setting extra session values."""
    st.session_state.page = page
    for key, value in state.items():
        st.session_state[key] = value


def get_translator() -> Translator:
    return Translator(st.session_state.get("locale", "es"))


# =============================================================================
# Cached fetches (exceptions are not cached, so failures retry on next rerun)
# =============================================================================

@st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
def _fetch_forests(_client: WysycsAPIClient) -> List[Forest]:
    return _client.forests.get_all()


@st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
def _fetch_forest(_client: WysycsAPIClient, forest_id: str) -> Forest:
    return _client.forests.get_by_id(forest_id)


@st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
def _fetch_fires(_client: WysycsAPIClient, days: int) -> List[Fire]:
    return _client.fires.get_peru_fires(days)


@st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
def _fetch_prediction(_client: WysycsAPIClient, lat: float, lng: float) -> FirePrediction:
    return _client.fires.fire_prediction(lat, lng)


def load_forests(client: WysycsAPIClient) -> List[Forest]:
    try:
        return _fetch_forests(client)
    except APIError as e:
        logger.error(f"Error loading forests: {e}")
        return []


def load_forest(client: WysycsAPIClient, forest_id) -> Optional[Forest]:
    try:
        return _fetch_forest(client, str(forest_id))
    except APIError as e:
        logger.error(f"Error loading forest {forest_id}: {e}")
        return None


def load_fires(client: WysycsAPIClient, days: int) -> List[Fire]:
    try:
        return _fetch_fires(client, days)
    except APIError as e:
        logger.error(f"Error fetching fires: {e}")
        return []


def load_prediction(client: WysycsAPIClient, lat: float, lng: float) -> Optional[FirePrediction]:
    try:
        return _fetch_prediction(client, lat, lng)
    except APIError as e:
        logger.error(f"Error fetching fire prediction: {e}")
        return None


# =============================================================================
# Widgets
# =============================================================================

def render_header(title: str, description: str = "") -> None:
    st.title(title)
    if description:
        st.caption(description)


def render_language_switcher() -> None:
    # value comes from session state set in init_session_state
    st.selectbox(
        "🌐",
        options=list(SUPPORTED_LOCALES),
        format_func=lambda code: LOCALE_NAMES[code],
        key="locale",
    )


def health_badge_html(health: Optional[float], t: Translator) -> str:
    summary = health_summary(health, t)
    value = f"{health}%" if health else "—"
    return (
        f'<span style="color:{summary["text"]}; background:{summary["bg"]}; '
        f'border-radius:6px; padding:2px 8px; font-size:0.85em;">'
        f'{value} · {summary["label"]}</span>'
    )


def render_health_bar(health: Optional[float]) -> None:
    summary = health_summary(health)
    width = max(0, min(100, health or 0))
    st.markdown(
        f'<div style="background:#e5e7eb; border-radius:4px; height:8px;">'
        f'<div style="background:{summary["bar"]}; width:{width}%; height:8px; border-radius:4px;"></div>'
        f"</div>",
        unsafe_allow_html=True,
    )

