"""Tests for health categories, guardian levels and date helpers."""

from datetime import datetime, timezone

import pytest

from wysycs.forest_utils import (
    days_since_adoption,
    format_date,
    health_category,
    health_color,
    health_label,
    level_card_style,
    level_emoji,
)


class TestHealth:
    @pytest.mark.parametrize("health,expected", [
        (100, "healthy"),
        (70, "healthy"),
        (69.9, "moderate"),
        (50, "moderate"),
        (49, "critical"),
        (1, "critical"),
        (0, "unknown"),
        (None, "unknown"),
    ])
    def test_category(self, health, expected):
        assert health_category(health) == expected

    def test_labels(self, es, en):
        assert health_label(85, es) == "Saludable"
        assert health_label(55, es) == "Moderado"
        assert health_label(20, es) == "Crítico"
        assert health_label(None, es) == "Desconocido"
        assert health_label(85, en) == "Healthy"

    def test_colors(self):
        assert health_color(85) == "#16a34a"
        assert health_color(20, "bar") == "#ef4444"
        assert health_color(None, "bg") == "#f3f4f6"


class TestLevels:
    def test_known_levels(self):
        assert level_emoji("Sembrador") == "🌱"
        assert level_emoji("Protector") == "🌳"
        assert level_emoji("Guardián") == "🦅"
        assert level_emoji("Líder Ancestral") == "🏆"

    def test_unknown_level(self):
        assert level_emoji("Nuevo") == "🌿"
        assert "#e5e7eb" in level_card_style("Nuevo")


class TestDaysSinceAdoption:
    def test_whole_days(self):
        now = datetime(2024, 3, 11, 12, 0, tzinfo=timezone.utc)
        assert days_since_adoption("2024-03-01T00:00:00Z", now=now) == 10

    def test_naive_now_treated_as_utc(self):
        assert days_since_adoption("2024-03-01T00:00:00Z", now=datetime(2024, 3, 2, 6, 0)) == 1

    def test_naive_adoption_date(self):
        now = datetime(2024, 3, 3, 0, 0, tzinfo=timezone.utc)
        assert days_since_adoption("2024-03-01T00:00:00", now=now) == 2

    def test_unparseable(self):
        assert days_since_adoption("yesterday") == 0
        assert days_since_adoption("") == 0


class TestFormatDate:
    def test_spanish(self):
        assert format_date("2024-03-12T10:00:00Z", "es") == "12 de marzo de 2024"

    def test_english(self):
        assert format_date("2024-03-12T10:00:00Z", "en") == "March 12, 2024"

    def test_unparseable_returned_unchanged(self):
        assert format_date("pronto", "es") == "pronto"
