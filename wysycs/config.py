"""
Dashboard configuration.

Settings can be set programmatically, loaded from a YAML file, or picked up
from environment variables:
    WYSYCS_API_URL: Base URL of the forest/fires REST API
    WYSYCS_LOCALE: Default interface language (es or en)
    WYSYCS_CONFIG: Path to a YAML config file (read by the app entry point)
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from .i18n import resolve_locale

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_API_BASE_URL = "https://web-production-7dae.up.railway.app/api/v1"

# Preset locations offered for one-click risk analysis
DEFAULT_TEST_LOCATIONS = [
    {"name": "Zona Crítica - Ucayali", "lat": -8.3, "lon": -75.6, "desc": "Incendio detectado"},
    {"name": "Madre de Dios", "lat": -12.87, "lon": -70.44, "desc": "Monitoreo activo"},
    {"name": "Ucayali Norte", "lat": -7.86, "lon": -71.73, "desc": "Alta actividad"},
    {"name": "San Martín", "lat": -6.18, "lon": -76.09, "desc": "Zona de vigilancia"},
]


@dataclass
class DashboardConfig:
    """
    Dashboard configuration.

    Can be loaded from YAML file or set programmatically.
    """
    # API
    api_base_url: Optional[str] = None
    timeout: float = 30.0

    # UI
    default_locale: Optional[str] = None

    # Fires page
    fire_days: int = 2
    fire_day_options: List[int] = field(default_factory=lambda: [1, 2, 3, 7, 10])
    risk_radius_km: int = 20
    quick_analysis_radius_km: int = 50
    forest_risk_radius_km: int = 50
    max_fire_rows: int = 20
    test_locations: List[Dict] = field(default_factory=lambda: list(DEFAULT_TEST_LOCATIONS))

    # Guardian page
    leaderboard_limit: int = 10

    # Maps (center is lat, lon over Peru)
    map_center: Tuple[float, float] = (-9.19, -75.0152)
    map_zoom: int = 4
    heatmap_radius: int = 30

    log_level: str = "INFO"

    def __post_init__(self):
        """Fill unset values from environment."""
        if self.api_base_url is None:
            self.api_base_url = os.environ.get("WYSYCS_API_URL", DEFAULT_API_BASE_URL)
        if self.default_locale is None:
            self.default_locale = os.environ.get("WYSYCS_LOCALE", "es")
        self.default_locale = resolve_locale(self.default_locale)

        self.api_base_url = self.api_base_url.rstrip("/")
        self.map_center = tuple(self.map_center)

    @classmethod
    def from_yaml(cls, filepath: Union[str, Path]) -> "DashboardConfig":
        """Load configuration from YAML file."""
        with open(filepath) as f:
            data = yaml.safe_load(f) or {}

        # Flatten nested structure
        config_data: Dict[str, Any] = {}

        if "api" in data:
            if "base_url" in data["api"]:
                config_data["api_base_url"] = data["api"]["base_url"]
            config_data["timeout"] = data["api"].get("timeout", 30.0)

        if "ui" in data:
            if "locale" in data["ui"]:
                config_data["default_locale"] = data["ui"]["locale"]
            config_data["leaderboard_limit"] = data["ui"].get("leaderboard_limit", 10)

        if "fires" in data:
            fires = data["fires"]
            config_data["fire_days"] = fires.get("days", 2)
            if "day_options" in fires:
                config_data["fire_day_options"] = fires["day_options"]
            config_data["risk_radius_km"] = fires.get("risk_radius_km", 20)
            config_data["quick_analysis_radius_km"] = fires.get("quick_analysis_radius_km", 50)
            config_data["forest_risk_radius_km"] = fires.get("forest_risk_radius_km", 50)
            config_data["max_fire_rows"] = fires.get("max_rows", 20)
            if "test_locations" in fires:
                config_data["test_locations"] = fires["test_locations"]

        if "maps" in data:
            if "center" in data["maps"]:
                config_data["map_center"] = tuple(data["maps"]["center"])
            config_data["map_zoom"] = data["maps"].get("zoom", 4)
            config_data["heatmap_radius"] = data["maps"].get("heatmap_radius", 30)

        if "logging" in data:
            config_data["log_level"] = data["logging"].get("level", "INFO")

        logger.info(f"Loaded dashboard config from {filepath}")
        return cls(**config_data)

    def save_yaml(self, filepath: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        data = {
            "api": {
                "base_url": self.api_base_url,
                "timeout": self.timeout,
            },
            "ui": {
                "locale": self.default_locale,
                "leaderboard_limit": self.leaderboard_limit,
            },
            "fires": {
                "days": self.fire_days,
                "day_options": list(self.fire_day_options),
                "risk_radius_km": self.risk_radius_km,
                "quick_analysis_radius_km": self.quick_analysis_radius_km,
                "forest_risk_radius_km": self.forest_risk_radius_km,
                "max_rows": self.max_fire_rows,
                "test_locations": self.test_locations,
            },
            "maps": {
                "center": list(self.map_center),
                "zoom": self.map_zoom,
                "heatmap_radius": self.heatmap_radius,
            },
            "logging": {
                "level": self.log_level,
            },
        }

        with open(filepath, "w") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)


def load_config(config_file: Optional[Union[str, Path]] = None) -> DashboardConfig:
    """
    Load dashboard configuration.

    Uses the given file, else the file named by WYSYCS_CONFIG, else defaults.
    """
    config_file = config_file or os.environ.get("WYSYCS_CONFIG")
    if config_file:
        return DashboardConfig.from_yaml(config_file)
    return DashboardConfig()


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging in the dashboard's format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
