"""
Fire-risk analysis helpers.

Scoring happens server-side; this module prepares the query (preset
locations, custom coordinate search), runs it and maps risk levels to colors.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from shapely.geometry import Point, box

from .api import APIError, WysycsAPIClient
from .models import RiskAnalysis

logger = logging.getLogger(__name__)

RISK_CRITICAL = "CRÍTICO"
RISK_HIGH = "ALTO"
RISK_MODERATE = "MODERADO"
RISK_LOW = "BAJO"
RISK_LEVELS = [RISK_CRITICAL, RISK_HIGH, RISK_MODERATE, RISK_LOW]

# border, background
RISK_COLORS = {
    RISK_CRITICAL: ("#dc2626", "#fef2f2"),
    RISK_HIGH: ("#f87171", "#fef2f2"),
    RISK_MODERATE: ("#eab308", "#fefce8"),
    RISK_LOW: ("#22c55e", "#f0fdf4"),
}
DEFAULT_RISK_COLORS = ("#e5e7eb", "#ffffff")

# Valid WGS84 extent
WORLD_BOUNDS = box(-180.0, -90.0, 180.0, 90.0)


@dataclass
class PresetLocation:
    """A preset location offered for one-click analysis."""
    name: str
    lat: float
    lon: float
    desc: str = ""

    @classmethod
    def from_dict(cls, data: Dict) -> "PresetLocation":
        return cls(
            name=data["name"],
            lat=float(data["lat"]),
            lon=float(data["lon"]),
            desc=data.get("desc", ""),
        )


def load_test_locations(raw: List[Dict]) -> List[PresetLocation]:
    return [PresetLocation.from_dict(loc) for loc in raw]


def risk_colors(level: str) -> Tuple[str, str]:
    """(border, background) colors for a risk level."""
    return RISK_COLORS.get(level, DEFAULT_RISK_COLORS)


def is_valid_coordinate(lat: float, lon: float) -> bool:
    return WORLD_BOUNDS.covers(Point(lon, lat))


def parse_custom_search(
    lat: str,
    lon: str,
    radius: str = "",
    default_radius_km: int = 20,
) -> Optional[Tuple[float, float, int]]:
    """
    Parse the custom search form.

    Latitude and longitude are required; an empty radius uses the default.

    Returns:
        (lat, lon, radius_km), or None when the input cannot be searched
    """
    if not lat or not lon or not str(lat).strip() or not str(lon).strip():
        return None

    try:
        lat_value = float(lat)
        lon_value = float(lon)
        radius_km = int(float(radius)) if str(radius).strip() else default_radius_km
    except ValueError:
        logger.warning(f"Invalid search input: lat={lat!r} lon={lon!r} radius={radius!r}")
        return None

    if not is_valid_coordinate(lat_value, lon_value):
        logger.warning(f"Coordinates out of range: {lat_value}, {lon_value}")
        return None

    return lat_value, lon_value, radius_km or default_radius_km


def analyze_location(
    client: WysycsAPIClient,
    lat: float,
    lon: float,
    radius_km: float,
    days: int,
) -> Optional[RiskAnalysis]:
    """
    Run a risk analysis, returning None when the request fails.
    """
    try:
        return client.fires.analyze_risk(lat=lat, lon=lon, radius_km=radius_km, days=days)
    except APIError as e:
        logger.error(f"Error analyzing location ({lat}, {lon}): {e}")
        return None
