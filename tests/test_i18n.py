"""Tests for message catalogs and number formatting."""

from wysycs.i18n import SUPPORTED_LOCALES, Translator, format_exact_number, format_number, load_catalog


def _flatten(node, prefix=""):
    keys = set()
    for key, value in node.items():
        path = f"{prefix}{key}"
        if isinstance(value, dict):
            keys |= _flatten(value, path + ".")
        else:
            keys.add(path)
    return keys


class TestTranslator:
    def test_lookup(self, es, en):
        assert es("adoption.error.required") == "Por favor completa todos los campos requeridos"
        assert en.t("health.healthy") == "Healthy"

    def test_interpolation(self, es, en):
        assert es("fires.prediction.day", day=3) == "Día 3"
        assert en("fires.table.showingOf", shown=20, total=57) == "Showing 20 of 57 fires"

    def test_missing_key_returns_key(self, es):
        assert es("does.not.exist") == "does.not.exist"

    def test_section_key_returns_key(self, es):
        assert es("fires.kpis") == "fires.kpis"

    def test_unsupported_locale_falls_back(self):
        assert Translator("fr").locale == "es"

    def test_catalogs_have_same_keys(self):
        es_keys, en_keys = (_flatten(load_catalog(locale)) for locale in SUPPORTED_LOCALES)
        assert es_keys == en_keys

    def test_twelve_months(self):
        for locale in SUPPORTED_LOCALES:
            assert len(load_catalog(locale)["dates"]["months"]) == 12


class TestFormatNumber:
    def test_spanish_separators(self):
        assert format_number(1234567, "es") == "1.234.567"
        assert format_number(1963.5, "es") == "1.963,5"

    def test_english_separators(self):
        assert format_number(1234567, "en") == "1,234,567"
        assert format_number(1963.5, "en") == "1,963.5"

    def test_whole_float(self):
        assert format_number(7854.0, "en") == "7,854"


class TestFormatExactNumber:
    def test_decimals_never_rounded(self):
        assert format_exact_number(1914.268, "en") == "1,914.268"
        assert format_exact_number(1914.268, "es") == "1.914,268"
        assert format_exact_number(1.2345, "en") == "1.2345"

    def test_integers_grouped(self):
        assert format_exact_number(1234567, "es") == "1.234.567"
        assert format_exact_number(7854.0, "en") == "7,854"

    def test_negative(self):
        assert format_exact_number(-75.6012, "en") == "-75.6012"

    def test_exponent_left_as_served(self):
        assert format_exact_number(1e-07, "en") == "1e-07"
