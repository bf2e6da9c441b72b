"""Tests for the wysycs console script."""

import os

import pytest

from wysycs import cli


class TestStreamlitArgv:
    def test_defaults(self):
        argv = cli.build_streamlit_argv()
        assert argv[:2] == ["streamlit", "run"]
        assert argv[2].endswith("app.py")
        assert len(argv) == 3

    def test_port_and_headless(self):
        argv = cli.build_streamlit_argv(port=8502, headless=True)
        assert argv[3:] == ["--server.port", "8502", "--server.headless", "true"]


class TestMain:
    @pytest.fixture
    def launched(self, monkeypatch):
        calls = []
        monkeypatch.setattr("streamlit.web.cli.main", lambda: calls.append(list(cli.sys.argv)) or 0)
        monkeypatch.setattr(cli.sys, "argv", ["wysycs"])
        for name in ("WYSYCS_CONFIG", "WYSYCS_LOCALE", "WYSYCS_API_URL"):
            monkeypatch.setenv(name, "")
        return calls

    def test_options_exported_to_environment(self, launched, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("ui:\n  locale: en\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--config", str(config), "--locale", "en", "--api-url", "http://api.local", "--port", "9000"])

        assert exc_info.value.code == 0
        assert os.environ["WYSYCS_CONFIG"] == str(config.resolve())
        assert os.environ["WYSYCS_LOCALE"] == "en"
        assert os.environ["WYSYCS_API_URL"] == "http://api.local"
        assert launched[0][3:] == ["--server.port", "9000"]

    def test_missing_config_file(self, launched, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--config", str(tmp_path / "missing.yaml")])

        assert exc_info.value.code == 2
        assert launched == []

    def test_unsupported_locale_rejected(self, launched):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--locale", "fr"])

        assert exc_info.value.code == 2
