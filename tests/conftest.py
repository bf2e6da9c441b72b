"""Shared fixtures: a canned-response HTTP session and sample API payloads."""

import pytest
import requests

from wysycs.api import APIConfig, WysycsAPIClient
from wysycs.i18n import Translator

BASE_URL = "https://api.test/api/v1"

INVALID_JSON = object()


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body
        self.text = "" if body is INVALID_JSON else str(body)

    def json(self):
        if self._body is INVALID_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeSession:
    """
    Stand-in for requests.Session.

    Routes map "METHOD /path" to a (status, body) tuple or an exception
    instance to raise. Every call is recorded.
    """

    def __init__(self, routes=None):
        self.headers = {}
        self.routes = dict(routes or {})
        self.calls = []

    def request(self, method, url, params=None, json=None, timeout=None):
        path = url[len(BASE_URL):] if url.startswith(BASE_URL) else url
        self.calls.append({
            "method": method,
            "url": url,
            "path": path,
            "params": params,
            "json": json,
            "timeout": timeout,
        })
        route = self.routes.get(f"{method} {path}")
        if route is None:
            return FakeResponse(404, {"detail": "Not Found"})
        if isinstance(route, Exception):
            raise route
        status, body = route
        return FakeResponse(status, body)


def make_client(routes=None):
    session = FakeSession(routes)
    client = WysycsAPIClient(APIConfig(base_url=BASE_URL), session=session)
    return client, session


@pytest.fixture
def es():
    return Translator("es")


@pytest.fixture
def en():
    return Translator("en")


@pytest.fixture
def forest_payload():
    return {
        "id": 1,
        "name": "Bosque Shipibo",
        "latitude": -8.38,
        "longitude": -74.55,
        "health": 82,
        "co2_capture": "1,200 ton/año",
        "species_count": 340,
        "community": "Comunidad Shipibo-Conibo",
        "fun_facts": ["Hogar del jaguar"],
        "created_at": "2024-03-12T10:00:00Z",
        "health_nasa": {
            "ndvi_value": 0.78,
            "health_percentage": 82,
            "status": "Saludable",
            "color": "#22c55e",
            "source": "NASA MODIS",
            "is_real_data": True,
            "last_update": "2024-10-01",
        },
    }


@pytest.fixture
def fire_payloads():
    return [
        {"latitude": -8.30, "longitude": -75.60, "brightness": 340.0, "confidence": "h",
         "acquired_date": "2024-10-01", "acquired_time": "0542"},
        {"latitude": -12.87, "longitude": -70.44, "brightness": 300.0, "confidence": "n",
         "acquired_date": "2024-10-01", "acquired_time": "1810"},
        {"latitude": -7.86, "longitude": -71.73, "brightness": 321.0, "confidence": "high",
         "acquired_date": "2024-10-02", "acquired_time": "0600"},
    ]


@pytest.fixture
def guardian_payload(forest_payload):
    return {
        "guardian_email": "ana@example.com",
        "guardian_name": "Ana",
        "total_forests": 1,
        "total_points": 150,
        "guardian_level": "Protector",
        "adopted_forests": [
            {
                "id": 10,
                "forest_id": 1,
                "adoption_date": "2024-09-01T00:00:00Z",
                "forests": forest_payload,
                "health_nasa": forest_payload["health_nasa"],
            }
        ],
    }


@pytest.fixture
def progress_payload():
    return {
        "guardian_email": "ana@example.com",
        "guardian_name": "Ana",
        "current_level": {"name": "Protector", "emoji": "🌳", "points": 150},
        "next_level": {"name": "Guardián", "points_needed": 350, "progress_percentage": 30},
        "forests_adopted": 1,
    }


@pytest.fixture
def prediction_payload():
    return {
        "predictions": [
            {
                "day": 1,
                "date": "2024-10-03",
                "spread_radius_km": 1.25,
                "affected_area_ha": 490.87,
                "environmental_impact": {
                    "co2_tonnes": 1963.5,
                    "cars_equivalent": 427,
                    "species_at_risk": 12,
                    "water_sources_at_risk": 2,
                },
                "population_impact": {
                    "people_at_risk": 150,
                    "families_affected": 30,
                    "severity": "MODERADA",
                },
            },
            {
                "day": 2,
                "date": "2024-10-04",
                "spread_radius_km": 2.5,
                "affected_area_ha": 1963.5,
                "environmental_impact": {
                    "co2_tonnes": 7854,
                    "cars_equivalent": 1707,
                    "species_at_risk": 25,
                    "water_sources_at_risk": 4,
                },
                "population_impact": {
                    "people_at_risk": 600,
                    "families_affected": 120,
                    "severity": "ALTA",
                },
            },
        ]
    }


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
