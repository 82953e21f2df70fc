#!/usr/bin/env python3
"""
Kusto Connection Descriptor

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import logging
import sys

from . import __version__
from .application.exceptions import ApplicationError
from .application.use_cases import DescribeConnection
from .infrastructure.config import Settings, load_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


class Application:
    """
    Main application orchestrator.

    Handles run modes (single description or API) and lifecycle.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._describe = DescribeConnection(settings.parser)

    def run_once(self) -> int:
        """Describe the configured connection string."""
        description = self._describe.execute(self._settings.connection_string)
        logger.info("Connection string: %s", description.redacted_connection_string)
        return 0

    def run_api(self) -> None:
        """Run in API server mode."""
        import uvicorn

        from .infrastructure.adapters.api import create_app

        logger.info(
            "Starting API server on %s:%d",
            self._settings.api_host,
            self._settings.api_port,
        )

        app = create_app(describe=self._describe, version=__version__)

        uvicorn.run(
            app,
            host=self._settings.api_host,
            port=self._settings.api_port,
            log_level=self._settings.log_level.lower(),
        )

    def run(self) -> int:
        """
        Run the application based on configured mode.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        if self._settings.api_enabled:
            self.run_api()
            return 0

        return self.run_once()


def main() -> int:
    """Main entry point."""
    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        return Application(settings).run()

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except ApplicationError as e:
        logger.error("Connection error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
