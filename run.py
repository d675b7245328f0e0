"""Entry point for running the country info Flask app."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from app import create_app

logger = logging.getLogger(__name__)

DEFAULT_PORT = "8080"


def _prepare_environment() -> None:
    """Load environment variables from a local .env file if present."""

    project_root = os.path.abspath(os.path.dirname(__file__))
    env_file = os.path.join(project_root, ".env")
    if os.path.exists(env_file):
        load_dotenv(env_file)


def main() -> None:
    """Create the Flask app and run the development server."""

    _prepare_environment()

    config_name = os.getenv("APP_ENV")
    app = create_app(config_name=config_name)

    host = os.getenv("HOST", "0.0.0.0")
    port_value = os.getenv("PORT")
    if not port_value:
        logger.warning("$PORT has not been set. Default: %s", DEFAULT_PORT)
        port_value = DEFAULT_PORT
    debug = app.config.get("DEBUG", False)

    logger.info("Starting server on port %s ...", port_value)
    app.run(host=host, port=int(port_value), debug=debug)


if __name__ == "__main__":
    main()
