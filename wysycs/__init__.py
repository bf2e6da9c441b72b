"""
WYSYCS Forest and Wildfire Dashboard

A Streamlit dashboard for the WYSYCS community forest program in Peru:
monitored forests with NASA NDVI-derived health, VIIRS fire detections,
fire-risk analysis and spread prediction, and the guardian adoption and
gamification system. All scoring runs server-side; this package fetches,
aggregates lightly and displays.

Quick Start:
    # Launch the dashboard
    $ wysycs --port 8501 --locale en

    # Or use the API client directly
    from wysycs import WysycsAPIClient, compute_fire_stats

    client = WysycsAPIClient()
    fires = client.fires.get_peru_fires(days=3)
    stats = compute_fire_stats(fires)
    print(f"{stats.total_fires} fires, {stats.high_confidence_fires} high confidence")

Modules:
    - config: Dashboard configuration (YAML / environment)
    - models: Typed records for API payloads
    - api: REST client for forests, fires, guardians, gamification, adoption
    - forest_utils: Health categories, guardian levels, date formatting
    - stats: Forest and fire KPIs, health filtering
    - risk: Preset locations, custom search parsing, risk analysis
    - adoption: Adoption form validation and submission
    - profile: Guardian profile and community data
    - maps: folium forest map, fire heatmap and risk map
    - i18n: Spanish/English message catalogs
    - views, app: Streamlit pages and entry point
    - cli: ``wysycs`` console script

Environment Variables:
    WYSYCS_API_URL: API base URL (default: public deployment)
    WYSYCS_LOCALE: Default interface language, es or en
    WYSYCS_CONFIG: YAML config file read by the app
"""

__version__ = "1.0.0"

# Configuration
from .config import (
    DashboardConfig,
    load_config,
    configure_logging,
)

# API client
from .api import (
    WysycsAPIClient,
    APIConfig,
    APIError,
)

# Records
from .models import (
    Forest,
    HealthNasa,
    Fire,
    NearbyFire,
    RiskAssessment,
    RiskAnalysis,
    DayPrediction,
    FirePrediction,
    Guardian,
    AdoptedForest,
    GuardianProgress,
    Leaderboard,
    LeaderboardEntry,
    CommunityStats,
    AdoptionRequest,
)

# Aggregation
from .stats import (
    FireStats,
    ForestStats,
    compute_fire_stats,
    compute_forest_stats,
    filter_forests,
)

# Presentation helpers
from .forest_utils import (
    health_category,
    health_color,
    health_label,
    level_emoji,
    days_since_adoption,
    format_date,
)

# Workflows
from .risk import analyze_location, parse_custom_search
from .adoption import AdoptionForm, AdoptionOutcome, submit_adoption
from .profile import ProfileLookup, load_guardian_profile, load_community

# Translation
from .i18n import Translator, SUPPORTED_LOCALES

__all__ = [
    # Version
    "__version__",
    # Configuration
    "DashboardConfig",
    "load_config",
    "configure_logging",
    # API
    "WysycsAPIClient",
    "APIConfig",
    "APIError",
    # Records
    "Forest",
    "HealthNasa",
    "Fire",
    "NearbyFire",
    "RiskAssessment",
    "RiskAnalysis",
    "DayPrediction",
    "FirePrediction",
    "Guardian",
    "AdoptedForest",
    "GuardianProgress",
    "Leaderboard",
    "LeaderboardEntry",
    "CommunityStats",
    "AdoptionRequest",
    # Aggregation
    "FireStats",
    "ForestStats",
    "compute_fire_stats",
    "compute_forest_stats",
    "filter_forests",
    # Presentation
    "health_category",
    "health_color",
    "health_label",
    "level_emoji",
    "days_since_adoption",
    "format_date",
    # Workflows
    "analyze_location",
    "parse_custom_search",
    "AdoptionForm",
    "AdoptionOutcome",
    "submit_adoption",
    "ProfileLookup",
    "load_guardian_profile",
    "load_community",
    # Translation
    "Translator",
    "SUPPORTED_LOCALES",
]
