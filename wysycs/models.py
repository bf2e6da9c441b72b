"""
Typed records for the forest/fires REST API.

Every record is a read-only snapshot built from the JSON payload with
``from_dict``. Optional keys missing from a payload fall back to empty values
so a partial response still renders; missing prediction figures stay None
rather than being reported as zero.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class HealthNasa:
    """NDVI-derived health sub-record computed upstream."""
    ndvi_value: Optional[float] = None
    health_percentage: Optional[float] = None
    status: str = ""
    color: str = ""
    source: str = ""
    is_real_data: bool = False
    last_update: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> Optional["HealthNasa"]:
        if not data:
            return None
        return cls(
            ndvi_value=data.get("ndvi_value"),
            health_percentage=data.get("health_percentage"),
            status=data.get("status", ""),
            color=data.get("color", ""),
            source=data.get("source", ""),
            is_real_data=bool(data.get("is_real_data", False)),
            last_update=data.get("last_update", ""),
        )


@dataclass
class Forest:
    """A monitored forest."""
    id: Union[int, str]
    name: str
    latitude: float
    longitude: float
    health: Optional[float] = None
    co2_capture: str = ""
    species_count: int = 0
    community: str = ""
    fun_facts: List[str] = field(default_factory=list)
    created_at: str = ""
    health_nasa: Optional[HealthNasa] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "Forest":
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            latitude=float(data.get("latitude", 0.0)),
            longitude=float(data.get("longitude", 0.0)),
            health=data.get("health"),
            co2_capture=data.get("co2_capture") or "",
            species_count=data.get("species_count") or 0,
            community=data.get("community") or "",
            fun_facts=list(data.get("fun_facts") or []),
            created_at=data.get("created_at") or "",
            health_nasa=HealthNasa.from_dict(data.get("health_nasa")),
        )


@dataclass
class Fire:
    """A satellite fire detection."""
    latitude: float
    longitude: float
    brightness: float = 0.0
    confidence: str = ""
    acquired_date: str = ""
    acquired_time: str = ""

    @staticmethod
    def _fields(data: Dict) -> Dict[str, Any]:
        return {
            "latitude": float(data["latitude"]),
            "longitude": float(data["longitude"]),
            "brightness": float(data.get("brightness") or 0.0),
            "confidence": str(data.get("confidence") or ""),
            "acquired_date": data.get("acquired_date") or "",
            "acquired_time": str(data.get("acquired_time") or ""),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Fire":
        return cls(**cls._fields(data))


@dataclass
class NearbyFire(Fire):
    """A fire returned by a risk analysis, with its distance to the query point."""
    distance_km: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "NearbyFire":
        return cls(distance_km=data.get("distance_km"), **cls._fields(data))


@dataclass
class RiskAssessment:
    """Qualitative fire risk for a location."""
    level: str
    description: str = ""
    fires_detected: int = 0
    closest_fire_km: Optional[float] = None
    color: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "RiskAssessment":
        return cls(
            level=data.get("level", ""),
            description=data.get("description", ""),
            fires_detected=data.get("fires_detected") or 0,
            closest_fire_km=data.get("closest_fire_km"),
            color=data.get("color"),
        )


@dataclass
class RiskAnalysis:
    """Response of a fire-risk analysis around a coordinate."""
    risk_assessment: RiskAssessment
    recommendations: List[str] = field(default_factory=list)
    fires: List[NearbyFire] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> "RiskAnalysis":
        return cls(
            risk_assessment=RiskAssessment.from_dict(data.get("risk_assessment") or {}),
            recommendations=list(data.get("recommendations") or []),
            fires=[NearbyFire.from_dict(f) for f in data.get("fires") or []],
        )


@dataclass
class EnvironmentalImpact:
    co2_tonnes: Optional[float] = None
    cars_equivalent: Optional[float] = None
    species_at_risk: Any = None
    water_sources_at_risk: Any = None


@dataclass
class PopulationImpact:
    people_at_risk: Any = None
    families_affected: Any = None
    severity: Optional[str] = None


@dataclass
class DayPrediction:
    """Predicted fire spread for one day ahead."""
    day: int
    date: str
    spread_radius_km: Optional[float]
    affected_area_ha: Optional[float]
    environmental_impact: EnvironmentalImpact
    population_impact: PopulationImpact

    @classmethod
    def from_dict(cls, data: Dict) -> "DayPrediction":
        env = data.get("environmental_impact") or {}
        pop = data.get("population_impact") or {}
        return cls(
            day=data.get("day"),
            date=data.get("date", ""),
            spread_radius_km=data.get("spread_radius_km"),
            affected_area_ha=data.get("affected_area_ha"),
            environmental_impact=EnvironmentalImpact(
                co2_tonnes=env.get("co2_tonnes"),
                cars_equivalent=env.get("cars_equivalent"),
                species_at_risk=env.get("species_at_risk"),
                water_sources_at_risk=env.get("water_sources_at_risk"),
            ),
            population_impact=PopulationImpact(
                people_at_risk=pop.get("people_at_risk"),
                families_affected=pop.get("families_affected"),
                severity=pop.get("severity"),
            ),
        )


@dataclass
class FirePrediction:
    """Day-indexed spread prediction for a fire location."""
    predictions: List[DayPrediction] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> "FirePrediction":
        return cls(predictions=[DayPrediction.from_dict(p) for p in data.get("predictions") or []])


@dataclass
class AdoptedForest:
    """A forest adoption belonging to a guardian."""
    id: Union[int, str]
    forest_id: Union[int, str]
    adoption_date: str
    forest: Optional[Forest] = None
    health_nasa: Optional[HealthNasa] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "AdoptedForest":
        forest = data.get("forests")
        return cls(
            id=data.get("id"),
            forest_id=data.get("forest_id"),
            adoption_date=data.get("adoption_date", ""),
            forest=Forest.from_dict(forest) if forest else None,
            health_nasa=HealthNasa.from_dict(data.get("health_nasa")),
        )


@dataclass
class Guardian:
    """An end user who has adopted forests."""
    guardian_email: str
    guardian_name: str = ""
    adopted_forests: List[AdoptedForest] = field(default_factory=list)
    total_forests: int = 0
    total_points: int = 0
    guardian_level: str = ""

    @classmethod
    def from_dict(cls, data: Dict) -> "Guardian":
        return cls(
            guardian_email=data.get("guardian_email", ""),
            guardian_name=data.get("guardian_name") or "",
            adopted_forests=[AdoptedForest.from_dict(a) for a in data.get("adopted_forests") or []],
            total_forests=data.get("total_forests") or 0,
            total_points=data.get("total_points") or 0,
            guardian_level=data.get("guardian_level") or "",
        )


@dataclass
class CurrentLevel:
    name: str
    emoji: str = ""
    points: int = 0


@dataclass
class NextLevel:
    name: str
    points_needed: int = 0
    progress_percentage: float = 0


@dataclass
class GuardianProgress:
    """Gamification progress of a guardian towards the next level."""
    guardian_email: str
    guardian_name: str
    current_level: CurrentLevel
    next_level: Optional[NextLevel] = None
    forests_adopted: int = 0

    @property
    def at_max_level(self) -> bool:
        return self.next_level is None

    @classmethod
    def from_dict(cls, data: Dict) -> "GuardianProgress":
        current = data.get("current_level") or {}
        nxt = data.get("next_level")
        return cls(
            guardian_email=data.get("guardian_email", ""),
            guardian_name=data.get("guardian_name") or "",
            current_level=CurrentLevel(
                name=current.get("name", ""),
                emoji=current.get("emoji", ""),
                points=current.get("points", 0),
            ),
            next_level=NextLevel(
                name=nxt.get("name", ""),
                points_needed=nxt.get("points_needed", 0),
                progress_percentage=nxt.get("progress_percentage", 0),
            ) if nxt else None,
            forests_adopted=data.get("forests_adopted") or 0,
        )


@dataclass
class LeaderboardEntry:
    rank: int
    guardian_name: str
    guardian_email: str
    total_points: int
    guardian_level: str
    level_emoji: str = ""
    forests_count: int = 0

    @classmethod
    def from_dict(cls, data: Dict) -> "LeaderboardEntry":
        return cls(
            rank=data.get("rank"),
            guardian_name=data.get("guardian_name") or "",
            guardian_email=data.get("guardian_email", ""),
            total_points=data.get("total_points") or 0,
            guardian_level=data.get("guardian_level") or "",
            level_emoji=data.get("level_emoji") or "",
            forests_count=data.get("forests_count") or 0,
        )


@dataclass
class Leaderboard:
    entries: List[LeaderboardEntry] = field(default_factory=list)
    total_guardians: int = 0

    @classmethod
    def from_dict(cls, data: Dict) -> "Leaderboard":
        return cls(
            entries=[LeaderboardEntry.from_dict(e) for e in data.get("leaderboard") or []],
            total_guardians=data.get("total_guardians") or 0,
        )


@dataclass
class CommunityStats:
    """Global gamification figures across all guardians."""
    total_adoptions: int = 0
    total_guardians: int = 0
    total_alerts_sent: int = 0
    level_distribution: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict) -> "CommunityStats":
        return cls(
            total_adoptions=data.get("total_adoptions") or 0,
            total_guardians=data.get("total_guardians") or 0,
            total_alerts_sent=data.get("total_alerts_sent") or 0,
            level_distribution=dict(data.get("level_distribution") or {}),
        )


@dataclass
class AdoptionRequest:
    forest_id: Union[int, str]
    guardian_name: str
    guardian_email: str
    telegram_chat_id: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return {
            "forest_id": self.forest_id,
            "guardian_name": self.guardian_name,
            "guardian_email": self.guardian_email,
            "telegram_chat_id": self.telegram_chat_id or None,
        }
