"""
Shared helpers for forest health and guardian level presentation.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Dict, Optional

from .i18n import Translator, load_catalog, resolve_locale

logger = logging.getLogger(__name__)

# Health thresholds (percent)
HEALTHY_THRESHOLD = 70
MODERATE_THRESHOLD = 50

HEALTH_UNKNOWN = "unknown"
HEALTH_HEALTHY = "healthy"
HEALTH_MODERATE = "moderate"
HEALTH_CRITICAL = "critical"

# text, background, progress bar
HEALTH_COLORS = {
    HEALTH_HEALTHY: {"text": "#16a34a", "bg": "#dcfce7", "bar": "#22c55e"},
    HEALTH_MODERATE: {"text": "#ca8a04", "bg": "#fef9c3", "bar": "#eab308"},
    HEALTH_CRITICAL: {"text": "#dc2626", "bg": "#fee2e2", "bar": "#ef4444"},
    HEALTH_UNKNOWN: {"text": "#6b7280", "bg": "#f3f4f6", "bar": "#6b7280"},
}

# Guardian levels, lowest first
GUARDIAN_LEVELS = ["Sembrador", "Protector", "Guardián", "Líder Ancestral"]

LEVEL_EMOJIS = {
    "Sembrador": "🌱",
    "Protector": "🌳",
    "Guardián": "🦅",
    "Líder Ancestral": "🏆",
}
DEFAULT_LEVEL_EMOJI = "🌿"

# gradient start, gradient end, border
LEVEL_COLORS = {
    "Sembrador": ("#f0fdf4", "#ecfdf5", "#bbf7d0"),
    "Protector": ("#fffbeb", "#fefce8", "#fde68a"),
    "Guardián": ("#faf5ff", "#fdf2f8", "#e9d5ff"),
    "Líder Ancestral": ("#eff6ff", "#eef2ff", "#bfdbfe"),
}
DEFAULT_LEVEL_COLORS = ("#f9fafb", "#f8fafc", "#e5e7eb")


def health_category(health: Optional[float]) -> str:
    """
    Classify a health percentage.

    Missing or zero health is reported as unknown.
    """
    if not health:
        return HEALTH_UNKNOWN
    if health >= HEALTHY_THRESHOLD:
        return HEALTH_HEALTHY
    if health >= MODERATE_THRESHOLD:
        return HEALTH_MODERATE
    return HEALTH_CRITICAL


def health_color(health: Optional[float], kind: str = "text") -> str:
    """Hex color for a health value; kind is text, bg or bar."""
    return HEALTH_COLORS[health_category(health)][kind]


def health_label(health: Optional[float], translator: Optional[Translator] = None) -> str:
    """Human label for a health value (Saludable, Moderado, Crítico, Desconocido)."""
    translator = translator or Translator()
    return translator.t(f"health.{health_category(health)}")


def level_emoji(level: str) -> str:
    return LEVEL_EMOJIS.get(level, DEFAULT_LEVEL_EMOJI)


def level_colors(level: str) -> tuple:
    return LEVEL_COLORS.get(level, DEFAULT_LEVEL_COLORS)


def level_card_style(level: str) -> str:
    """Inline CSS for a guardian level card."""
    start, end, border = level_colors(level)
    return (
        f"background: linear-gradient(to right, {start}, {end}); "
        f"border: 1px solid {border}; border-radius: 8px; padding: 12px;"
    )


def parse_iso_datetime(value: str) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp, accepting a trailing Z."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable date: {value}")
        return None


def days_since_adoption(adoption_date: str, now: Optional[datetime] = None) -> int:
    """Whole days elapsed since an ISO adoption date (0 if unparseable)."""
    adopted = parse_iso_datetime(adoption_date)
    if adopted is None:
        return 0
    if now is None:
        now = datetime.now(timezone.utc) if adopted.tzinfo else datetime.now()
    elif adopted.tzinfo and now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    elif now.tzinfo and adopted.tzinfo is None:
        adopted = adopted.replace(tzinfo=timezone.utc)
    return math.floor((now - adopted).total_seconds() / 86400)


def format_date(date_string: str, locale: str = "es") -> str:
    """
    Format an ISO date as a long localized date.

    es: "12 de marzo de 2024", en: "March 12, 2024".
    Unparseable input is returned unchanged.
    """
    parsed = parse_iso_datetime(date_string)
    if parsed is None:
        return date_string

    locale = resolve_locale(locale)
    months = load_catalog(locale)["dates"]["months"]
    month = months[parsed.month - 1]
    if locale == "es":
        return f"{parsed.day} de {month} de {parsed.year}"
    return f"{month} {parsed.day}, {parsed.year}"


def coordinates_label(latitude: float, longitude: float, decimals: int = 2) -> str:
    return f"{latitude:.{decimals}f}°, {longitude:.{decimals}f}°"


def health_summary(health: Optional[float], translator: Optional[Translator] = None) -> Dict[str, str]:
    """Label and colors for rendering a health badge."""
    category = health_category(health)
    return {
        "category": category,
        "label": health_label(health, translator),
        **HEALTH_COLORS[category],
    }
