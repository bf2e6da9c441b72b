"""Tests for the REST client."""

import pytest

from wysycs.api import APIConfig, APIError, WysycsAPIClient
from wysycs.models import AdoptionRequest, Fire, Forest, NearbyFire

from tests.conftest import BASE_URL, INVALID_JSON, FakeSession, make_client


class TestClientSetup:
    def test_base_url_trailing_slash_stripped(self):
        config = APIConfig(base_url=BASE_URL + "/")
        assert config.base_url == BASE_URL

    def test_default_timeout_is_thirty_seconds(self):
        assert APIConfig().timeout == 30.0

    def test_json_headers_set_on_session(self):
        session = FakeSession()
        WysycsAPIClient(APIConfig(base_url=BASE_URL), session=session)
        assert session.headers["Content-Type"] == "application/json"
        assert session.headers["Accept"] == "application/json"


class TestForests:
    def test_get_all(self, forest_payload):
        client, session = make_client({"GET /forests": (200, [forest_payload])})

        forests = client.forests.get_all()

        assert len(forests) == 1
        assert isinstance(forests[0], Forest)
        assert forests[0].name == "Bosque Shipibo"
        assert session.calls[0]["url"] == f"{BASE_URL}/forests"
        assert session.calls[0]["timeout"] == 30.0

    def test_get_by_id(self, forest_payload):
        client, session = make_client({"GET /forests/1": (200, forest_payload)})

        forest = client.forests.get_by_id(1)

        assert forest.id == 1
        assert forest.health_nasa.ndvi_value == 0.78


class TestFires:
    def test_peru_fires_sends_days_and_unwraps_list(self, fire_payloads):
        client, session = make_client({"GET /fires/peru": (200, {"fires": fire_payloads, "count": 3})})

        fires = client.fires.get_peru_fires(days=7)

        assert session.calls[0]["params"] == {"days": 7}
        assert len(fires) == 3
        assert all(isinstance(f, Fire) for f in fires)

    def test_peru_fires_default_two_days(self):
        client, session = make_client({"GET /fires/peru": (200, {"fires": []})})

        assert client.fires.get_peru_fires() == []
        assert session.calls[0]["params"] == {"days": 2}

    def test_analyze_risk_defaults(self):
        body = {
            "risk_assessment": {"level": "BAJO", "description": "Sin incendios", "fires_detected": 0},
            "recommendations": ["Mantener vigilancia"],
            "fires": [],
        }
        client, session = make_client({"GET /fires/analyze": (200, body)})

        analysis = client.fires.analyze_risk(lat=-8.3, lon=-75.6)

        assert session.calls[0]["params"] == {"lat": -8.3, "lon": -75.6, "radius_km": 20, "days": 2}
        assert analysis.risk_assessment.level == "BAJO"
        assert analysis.recommendations == ["Mantener vigilancia"]

    def test_analyze_risk_nearby_fires_carry_distance(self, fire_payloads):
        nearby = dict(fire_payloads[0], distance_km=3.2)
        body = {"risk_assessment": {"level": "CRÍTICO", "fires_detected": 1, "closest_fire_km": 3.2},
                "fires": [nearby]}
        client, session = make_client({"GET /fires/analyze": (200, body)})

        analysis = client.fires.analyze_risk(lat=-8.3, lon=-75.6, radius_km=50, days=3)

        assert session.calls[0]["params"]["radius_km"] == 50
        assert isinstance(analysis.fires[0], NearbyFire)
        assert analysis.fires[0].distance_km == 3.2

    def test_fire_prediction(self, prediction_payload):
        client, session = make_client({"GET /fires/predict": (200, prediction_payload)})

        prediction = client.fires.fire_prediction(-8.3, -75.6)

        assert session.calls[0]["params"] == {"lat": -8.3, "lng": -75.6}
        assert [p.day for p in prediction.predictions] == [1, 2]


class TestGuardianAndGamification:
    def test_email_is_url_encoded(self, guardian_payload):
        client, session = make_client({"GET /guardian/ana%2Btest%40example.com": (200, guardian_payload)})

        guardian = client.guardian.get_by_email("ana+test@example.com")

        assert guardian.guardian_name == "Ana"
        assert session.calls[0]["path"] == "/guardian/ana%2Btest%40example.com"

    def test_leaderboard_limit(self):
        body = {"leaderboard": [], "total_guardians": 0}
        client, session = make_client({"GET /gamification/leaderboard": (200, body)})

        client.gamification.get_leaderboard(limit=5)

        assert session.calls[0]["params"] == {"limit": 5}

    def test_global_stats(self):
        body = {"total_adoptions": 40, "total_guardians": 25, "total_alerts_sent": 7,
                "level_distribution": {"Sembrador": 20, "Protector": 5}}
        client, _ = make_client({"GET /gamification/stats": (200, body)})

        stats = client.gamification.get_global_stats()

        assert stats.total_adoptions == 40
        assert stats.level_distribution["Sembrador"] == 20


class TestAdoption:
    def test_adopt_posts_payload(self):
        client, session = make_client({"POST /adopt": (200, {"message": "ok"})})
        request = AdoptionRequest(forest_id=1, guardian_name="Ana", guardian_email="ana@example.com",
                                  telegram_chat_id="")

        assert client.adoption.adopt_forest(request) == {"message": "ok"}
        assert session.calls[0]["method"] == "POST"
        assert session.calls[0]["json"] == {
            "forest_id": 1,
            "guardian_name": "Ana",
            "guardian_email": "ana@example.com",
            "telegram_chat_id": None,
        }


class TestErrors:
    def test_http_error_carries_status_and_detail(self):
        client, _ = make_client({"GET /forests/99": (404, {"detail": "Bosque no encontrado"})})

        with pytest.raises(APIError) as exc_info:
            client.forests.get_by_id(99)

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Bosque no encontrado"

    def test_http_error_without_detail(self):
        client, _ = make_client({"GET /forests": (500, INVALID_JSON)})

        with pytest.raises(APIError) as exc_info:
            client.forests.get_all()

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail is None

    def test_connection_failure(self, connection_error):
        client, _ = make_client({"GET /forests": connection_error})

        with pytest.raises(APIError) as exc_info:
            client.forests.get_all()

        assert exc_info.value.status_code is None
        assert "No response from server" in str(exc_info.value)

    def test_invalid_json_body(self):
        client, _ = make_client({"GET /forests": (200, INVALID_JSON)})

        with pytest.raises(APIError):
            client.forests.get_all()

    def test_no_retry_on_failure(self, connection_error):
        client, session = make_client({"GET /fires/peru": connection_error})

        with pytest.raises(APIError):
            client.fires.get_peru_fires()

        assert len(session.calls) == 1
