"""
Translation lookup for the dashboard.

Message catalogs live in ``locales/<locale>.yaml`` as nested mappings and are
addressed with dotted keys, e.g. ``t("fires.kpis.totalFires")``.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"
SUPPORTED_LOCALES = ("es", "en")
DEFAULT_LOCALE = "es"

LOCALE_NAMES = {
    "es": "Español",
    "en": "English",
}


@lru_cache(maxsize=None)
def load_catalog(locale: str) -> Dict[str, Any]:
    """Load and cache the message catalog for a locale."""
    with open(LOCALES_DIR / f"{locale}.yaml", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def resolve_locale(locale: str) -> str:
    """Return a supported locale, falling back to the default."""
    if locale in SUPPORTED_LOCALES:
        return locale
    logger.warning(f"Unsupported locale '{locale}', using '{DEFAULT_LOCALE}'")
    return DEFAULT_LOCALE


class Translator:
    """
    Dotted-key lookup into one locale's catalog.

    A missing key returns the key itself so gaps are visible in the UI.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = resolve_locale(locale)
        self.catalog = load_catalog(self.locale)

    def lookup(self, key: str) -> Any:
        node: Any = self.catalog
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                logger.debug(f"Missing translation: {self.locale}:{key}")
                return None
            node = node[part]
        return node

    def t(self, key: str, **kwargs) -> str:
        value = self.lookup(key)
        if value is None or isinstance(value, dict):
            return key
        text = str(value)
        if kwargs:
            text = text.format(**kwargs)
        return text

    __call__ = t


def format_number(value: Union[int, float], locale: str = DEFAULT_LOCALE) -> str:
    """Format a number with the locale's thousands separator."""
    if isinstance(value, float) and not value.is_integer():
        text = f"{value:,.2f}".rstrip("0").rstrip(".")
    else:
        text = f"{int(value):,}"
    if locale == "es":
        # swap separators: 1,234.5 -> 1.234,5
        text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return text


def format_exact_number(value: Union[int, float], locale: str = DEFAULT_LOCALE) -> str:
    """
    Format a number keeping every digit it was given.

    Only the locale's separators are inserted; the fractional part is never
    rounded, so 478.567 stays 478.567 (478,567 in Spanish).
    """
    text = repr(value)
    if not text.lstrip("-").replace(".", "", 1).isdigit():
        # exponent notation, inf or nan
        return text
    whole, _, fraction = text.partition(".")
    if isinstance(value, float) and fraction == "0":
        fraction = ""
    sign = "-" if whole.startswith("-") else ""
    grouped = f"{int(whole.lstrip('-')):,}"
    thousands, decimal = (".", ",") if locale == "es" else (",", ".")
    grouped = grouped.replace(",", thousands)
    return sign + grouped + (decimal + fraction if fraction else "")
