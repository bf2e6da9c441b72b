"""Console script that launches the Streamlit dashboard."""

import logging
import os
import sys
from pathlib import Path

from .config import configure_logging
from .i18n import SUPPORTED_LOCALES

logger = logging.getLogger(__name__)

APP_PATH = Path(__file__).parent / "app.py"


def build_streamlit_argv(port=None, headless=False):
    """Argument vector for ``streamlit run`` on the dashboard app."""
    argv = ["streamlit", "run", str(APP_PATH)]
    if port:
        argv += ["--server.port", str(port)]
    if headless:
        argv += ["--server.headless", "true"]
    return argv


def main(argv=None):
    """Parse options, export them to the app's environment and run Streamlit."""
    import argparse

    parser = argparse.ArgumentParser(description="WYSYCS forest and wildfire dashboard")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--port", type=int, help="Port to serve the dashboard on")
    parser.add_argument("--locale", choices=SUPPORTED_LOCALES, help="Default interface language")
    parser.add_argument("--api-url", help="Base URL of the forest/fires API")
    parser.add_argument("--headless", action="store_true", help="Do not open a browser")

    args = parser.parse_args(argv)

    configure_logging()

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            parser.error(f"Config file not found: {config_path}")
        os.environ["WYSYCS_CONFIG"] = str(config_path.resolve())
    if args.locale:
        os.environ["WYSYCS_LOCALE"] = args.locale
    if args.api_url:
        os.environ["WYSYCS_API_URL"] = args.api_url

    from streamlit.web import cli as stcli

    sys.argv = build_streamlit_argv(args.port, args.headless)
    logger.info(f"Starting dashboard: {' '.join(sys.argv)}")
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
