"""Tests for guardian profile and community loading."""

from wysycs.models import Leaderboard
from wysycs.profile import leaderboard_rows, load_community, load_guardian_profile

from tests.conftest import make_client

EMAIL_PATH = "ana%40example.com"


class TestGuardianProfile:
    def test_empty_email_makes_no_request(self, es):
        client, session = make_client()

        lookup = load_guardian_profile(client, "   ", es)

        assert not lookup.found
        assert lookup.error == "Por favor ingresa tu email"
        assert session.calls == []

    def test_found(self, es, guardian_payload, progress_payload):
        client, _ = make_client({
            f"GET /guardian/{EMAIL_PATH}": (200, guardian_payload),
            f"GET /gamification/progress/{EMAIL_PATH}": (200, progress_payload),
        })

        lookup = load_guardian_profile(client, "ana@example.com", es)

        assert lookup.found
        assert lookup.error is None
        assert lookup.guardian.total_points == 150
        assert lookup.progress.next_level.name == "Guardián"

    def test_not_found_clears_both(self, en, progress_payload):
        client, _ = make_client({f"GET /gamification/progress/{EMAIL_PATH}": (200, progress_payload)})

        lookup = load_guardian_profile(client, "ana@example.com", en)

        assert lookup.guardian is None
        assert lookup.progress is None
        assert lookup.error == "No guardian found with that email"


class TestCommunity:
    LEADERBOARD = {"leaderboard": [], "total_guardians": 3}
    STATS = {"total_adoptions": 5, "total_guardians": 3, "total_alerts_sent": 1, "level_distribution": {}}

    def test_both_loaded(self):
        client, session = make_client({
            "GET /gamification/leaderboard": (200, self.LEADERBOARD),
            "GET /gamification/stats": (200, self.STATS),
        })

        leaderboard, stats = load_community(client, limit=5)

        assert leaderboard.total_guardians == 3
        assert stats.total_adoptions == 5
        assert len(session.calls) == 2

    def test_either_failure_yields_neither(self):
        client, _ = make_client({"GET /gamification/leaderboard": (200, self.LEADERBOARD)})

        assert load_community(client) == (None, None)


class TestLeaderboardRows:
    LEADERBOARD = {
        "leaderboard": [
            {"rank": 1, "guardian_name": "Luz", "guardian_email": "luz@example.com", "total_points": 900,
             "guardian_level": "Líder Ancestral", "level_emoji": "🏆", "forests_count": 6},
            {"rank": 2, "guardian_name": "Ana", "guardian_email": "ana@example.com", "total_points": 150,
             "guardian_level": "Protector", "forests_count": 1},
        ],
        "total_guardians": 2,
    }

    def test_crown_for_first_place(self, es):
        rows = leaderboard_rows(Leaderboard.from_dict(self.LEADERBOARD), es)

        assert [row["#"] for row in rows] == ["👑 1", "2"]
        assert rows[1]["Nivel"] == "🌳 Protector"
        assert rows[0]["Puntos"] == 900

    def test_current_guardian_marked(self, es, en):
        leaderboard = Leaderboard.from_dict(self.LEADERBOARD)

        rows = leaderboard_rows(leaderboard, es, current_email="Ana@Example.com ")
        assert [row["Guardián"] for row in rows] == ["Luz", "Ana (Tú)"]

        rows = leaderboard_rows(leaderboard, en, current_email="ana@example.com")
        assert rows[1]["Guardian"] == "Ana (You)"

    def test_no_badge_without_profile(self, es):
        rows = leaderboard_rows(Leaderboard.from_dict(self.LEADERBOARD), es)

        assert [row["Guardián"] for row in rows] == ["Luz", "Ana"]
