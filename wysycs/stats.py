"""
Client-side aggregation over fetched forests and fires.

Provides:
- Fire KPIs (count, high-confidence count, average brightness)
- Forest KPIs (average health, CO2 capture, species, critical/healthy counts)
- Health filtering for the forest list and map
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from .forest_utils import HEALTHY_THRESHOLD, MODERATE_THRESHOLD
from .i18n import Translator
from .models import Fire, Forest

logger = logging.getLogger(__name__)

HIGH_CONFIDENCE_VALUES = ("high", "h")

CONFIDENCE_KEYS = {
    "h": "high",
    "n": "nominal",
    "l": "low",
}

FILTER_ALL = "all"
FILTER_CRITICAL = "critical"
FILTER_MODERATE = "moderate"
FILTER_HEALTHY = "healthy"
HEALTH_FILTERS = (FILTER_ALL, FILTER_CRITICAL, FILTER_MODERATE, FILTER_HEALTHY)

_CO2_NUMBER = re.compile(r"[\d,]+")


@dataclass
class FireStats:
    total_fires: int
    high_confidence_fires: int
    average_brightness: str


@dataclass
class ForestStats:
    total_forests: int
    average_health: int
    total_co2: int
    total_species: int
    critical_forests: int
    healthy_forests: int


def is_high_confidence(confidence: str) -> bool:
    return confidence in HIGH_CONFIDENCE_VALUES


def confidence_label(confidence: str, translator: Optional[Translator] = None) -> str:
    """Readable confidence for h/n/l codes; other values pass through."""
    key = CONFIDENCE_KEYS.get(confidence)
    if key is None:
        return confidence
    translator = translator or Translator()
    return translator.t(f"fires.table.{key}")


def fires_to_dataframe(fires: List[Fire]) -> pd.DataFrame:
    """Tabulate fires for aggregation and display."""
    columns = ["latitude", "longitude", "brightness", "confidence", "acquired_date", "acquired_time"]
    if not fires:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(
        [{col: getattr(f, col) for col in columns} for f in fires],
        columns=columns,
    )


def compute_fire_stats(fires: List[Fire]) -> FireStats:
    """
    Compute fire KPIs.

    Average brightness is the mean rounded to one decimal, rendered as text;
    an empty list gives "0".
    """
    if not fires:
        return FireStats(total_fires=0, high_confidence_fires=0, average_brightness="0")

    df = fires_to_dataframe(fires)
    high = int(df["confidence"].isin(HIGH_CONFIDENCE_VALUES).sum())
    mean = float(pd.to_numeric(df["brightness"], errors="coerce").fillna(0).mean())

    return FireStats(
        total_fires=len(df),
        high_confidence_fires=high,
        average_brightness=f"{mean:.1f}",
    )


def extract_co2_tonnes(co2_capture: str) -> int:
    """First number in a formatted CO2 string, e.g. "1,200 ton/año" -> 1200."""
    match = _CO2_NUMBER.search(co2_capture or "")
    if not match:
        return 0
    digits = match.group(0).replace(",", "")
    return int(digits) if digits else 0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_forest_stats(forests: List[Forest]) -> ForestStats:
    """Compute dashboard KPIs over all forests."""
    if not forests:
        return ForestStats(0, 0, 0, 0, 0, 0)

    df = pd.DataFrame({
        "health": [f.health for f in forests],
        "co2": [extract_co2_tonnes(f.co2_capture) for f in forests],
        "species": [f.species_count or 0 for f in forests],
    })
    # forests without a health value are left out of the health figures
    health = pd.to_numeric(df["health"], errors="coerce")
    mean = health.mean()

    return ForestStats(
        total_forests=len(df),
        average_health=0 if pd.isna(mean) else _round_half_up(float(mean)),
        total_co2=int(df["co2"].sum()),
        total_species=int(df["species"].sum()),
        critical_forests=int((health < MODERATE_THRESHOLD).sum()),
        healthy_forests=int((health >= HEALTHY_THRESHOLD).sum()),
    )


def _matches_filter(health: Optional[float], health_filter: str) -> bool:
    if health_filter == FILTER_ALL:
        return True
    if health is None:
        return False
    value = health
    if health_filter == FILTER_CRITICAL:
        return value < MODERATE_THRESHOLD
    if health_filter == FILTER_MODERATE:
        return MODERATE_THRESHOLD <= value < HEALTHY_THRESHOLD
    return value >= HEALTHY_THRESHOLD


def filter_forests(forests: List[Forest], health_filter: str = FILTER_ALL) -> List[Forest]:
    """
    Restrict forests to a health range.

    Args:
        forests: Forests to filter
        health_filter: all, critical (<50), moderate (50-69) or healthy (>=70)

    Returns:
        Forests in the requested range, order preserved
    """
    if health_filter not in HEALTH_FILTERS:
        raise ValueError(f"Unknown health filter: {health_filter}")
    return [f for f in forests if _matches_filter(f.health, health_filter)]


def health_filter_counts(forests: List[Forest]) -> Dict[str, int]:
    return {name: len(filter_forests(forests, name)) for name in HEALTH_FILTERS}
