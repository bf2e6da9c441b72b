"""
REST client for the WYSYCS forest and wildfire API.

The API serves forests with NASA NDVI-derived health, VIIRS fire detections
over Peru, fire-risk analysis and spread prediction, plus the guardian
adoption and gamification system.

Resource groups:
    - forests: list and detail
    - fires: regional detections, risk analysis, spread prediction
    - guardian: guardian profile by email
    - gamification: level progress, leaderboard, community stats
    - adoption: adopt a forest

Example:
    client = WysycsAPIClient()
    forests = client.forests.get_all()
    fires = client.fires.get_peru_fires(days=3)
    analysis = client.fires.analyze_risk(lat=-8.3, lon=-75.6, radius_km=50)
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

import requests

from .config import DEFAULT_API_BASE_URL
from .models import (
    AdoptionRequest,
    CommunityStats,
    Fire,
    FirePrediction,
    Forest,
    Guardian,
    GuardianProgress,
    Leaderboard,
    RiskAnalysis,
)

logger = logging.getLogger(__name__)

DEFAULT_FIRE_DAYS = 2
DEFAULT_RISK_RADIUS_KM = 20
DEFAULT_LEADERBOARD_LIMIT = 10


class APIError(Exception):
    """
    A request to the API failed.

    Attributes:
        status_code: HTTP status, or None when no response was received
        detail: Server-provided ``detail`` message, if any
    """

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


@dataclass
class APIConfig:
    """
    API client configuration.

    Attributes:
        base_url: API base URL (all paths are relative to it)
        timeout: Request timeout in seconds
    """
    base_url: str = DEFAULT_API_BASE_URL
    timeout: float = 30.0

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")


class WysycsAPIClient:
    """
    HTTP client exposing the API's resource groups.

    Errors are logged once here and raised as APIError; callers decide what
    empty state to show. Requests are never retried.
    """

    def __init__(self, config: Optional[APIConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or APIConfig()
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": "wysycs-dashboard/1.0",
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

        self.forests = ForestsAPI(self)
        self.fires = FiresAPI(self)
        self.guardian = GuardianAPI(self)
        self.gamification = GamificationAPI(self)
        self.adoption = AdoptionAPI(self)

    @staticmethod
    def _extract_detail(response: requests.Response) -> Optional[str]:
        """Pull the ``detail`` field out of an error body."""
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body.get("detail"):
            detail = body["detail"]
            return detail if isinstance(detail, str) else str(detail)
        return None

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to the base URL (leading slash)
            params: Query parameters
            payload: JSON body

        Returns:
            Decoded JSON response

        Raises:
            APIError: On connection failure, HTTP error status or invalid JSON
        """
        url = f"{self.config.base_url}{path}"
        logger.debug(f"API request: {method} {url} params={params}")

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=payload,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"No response from server: {method} {url}: {e}")
            raise APIError(f"No response from server: {e}") from e

        if response.status_code >= 400:
            detail = self._extract_detail(response)
            logger.error(f"Server error: {response.status_code} {detail or response.text}")
            raise APIError(
                f"{method} {path} failed with status {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise APIError(f"Invalid JSON response from {path}", status_code=response.status_code) from e

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, payload: Dict[str, Any]) -> Any:
        return self.request("POST", path, payload=payload)


class ForestsAPI:
    def __init__(self, client: WysycsAPIClient):
        self._client = client

    def get_all(self) -> List[Forest]:
        """Get all monitored forests."""
        data = self._client.get("/forests")
        forests = [Forest.from_dict(f) for f in data or []]
        logger.info(f"Retrieved {len(forests)} forests")
        return forests

    def get_by_id(self, forest_id: Union[int, str]) -> Forest:
        """Get a single forest by ID."""
        return Forest.from_dict(self._client.get(f"/forests/{forest_id}"))


class FiresAPI:
    def __init__(self, client: WysycsAPIClient):
        self._client = client

    def get_peru_fires(self, days: int = DEFAULT_FIRE_DAYS) -> List[Fire]:
        """
        Get fire detections in Peru.

        Args:
            days: Number of days to look back

        Returns:
            List of fire detections
        """
        data = self._client.get("/fires/peru", params={"days": days})
        fires = [Fire.from_dict(f) for f in (data or {}).get("fires") or []]
        logger.info(f"Retrieved {len(fires)} fires for the last {days} day(s)")
        return fires

    def analyze_risk(
        self,
        lat: float,
        lon: float,
        radius_km: Optional[float] = None,
        days: Optional[int] = None,
    ) -> RiskAnalysis:
        """
        Analyze fire risk around a coordinate.

        Args:
            lat: Latitude
            lon: Longitude
            radius_km: Search radius (default 20 km)
            days: Days of detections to consider (default 2)

        Returns:
            Risk analysis with assessment, recommendations and nearby fires
        """
        params = {
            "lat": lat,
            "lon": lon,
            "radius_km": radius_km or DEFAULT_RISK_RADIUS_KM,
            "days": days or DEFAULT_FIRE_DAYS,
        }
        logger.info(f"Analyzing fire risk: {params}")
        return RiskAnalysis.from_dict(self._client.get("/fires/analyze", params=params))

    def fire_prediction(self, lat: float, lng: float) -> FirePrediction:
        """Get the day-by-day spread prediction for a fire location."""
        data = self._client.get("/fires/predict", params={"lat": lat, "lng": lng})
        return FirePrediction.from_dict(data or {})


class GuardianAPI:
    def __init__(self, client: WysycsAPIClient):
        self._client = client

    def get_by_email(self, email: str) -> Guardian:
        """Get a guardian and their adopted forests by email."""
        return Guardian.from_dict(self._client.get(f"/guardian/{quote(email, safe='')}"))


class GamificationAPI:
    def __init__(self, client: WysycsAPIClient):
        self._client = client

    def get_guardian_progress(self, email: str) -> GuardianProgress:
        """Get a guardian's current level and progress to the next one."""
        path = f"/gamification/progress/{quote(email, safe='')}"
        return GuardianProgress.from_dict(self._client.get(path))

    def get_leaderboard(self, limit: int = DEFAULT_LEADERBOARD_LIMIT) -> Leaderboard:
        """Get the top guardians by points."""
        data = self._client.get("/gamification/leaderboard", params={"limit": limit})
        return Leaderboard.from_dict(data or {})

    def get_global_stats(self) -> CommunityStats:
        """Get community-wide adoption figures."""
        return CommunityStats.from_dict(self._client.get("/gamification/stats") or {})


class AdoptionAPI:
    def __init__(self, client: WysycsAPIClient):
        self._client = client

    def adopt_forest(self, request: AdoptionRequest) -> Dict:
        """
        Adopt a forest.

        Returns:
            Server confirmation payload
        """
        logger.info(f"Adopting forest {request.forest_id} for {request.guardian_email}")
        return self._client.post("/adopt", request.to_payload())
