"""
Streamlit pages.

Each page module exposes ``render(ctx)``; ``PAGES`` maps the session page
key to its renderer.
"""

from . import dashboard, fires, forest_detail, guardian, landing
from .common import (
    PAGE_DASHBOARD,
    PAGE_FIRES,
    PAGE_FOREST_DETAIL,
    PAGE_GUARDIAN,
    PAGE_LANDING,
    ViewContext,
)

PAGES = {
    PAGE_LANDING: landing.render,
    PAGE_DASHBOARD: dashboard.render,
    PAGE_FIRES: fires.render,
    PAGE_GUARDIAN: guardian.render,
    PAGE_FOREST_DETAIL: forest_detail.render,
}

__all__ = [
    "PAGES",
    "ViewContext",
    "PAGE_LANDING",
    "PAGE_DASHBOARD",
    "PAGE_FIRES",
    "PAGE_GUARDIAN",
    "PAGE_FOREST_DETAIL",
]
