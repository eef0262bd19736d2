"""Process entry point for namedyn."""

import os
import sys

from namedyn._logging import configure_logging, get_logger
from namedyn.config import load_settings
from namedyn.exceptions import ConfigError
from namedyn.reconciler import Reconciler, run_forever

logger = get_logger(__name__)


def main() -> None:
    """Load configuration from the environment and reconcile forever.

    Exits with status 1 if configuration is missing; otherwise runs
    until the process is stopped.
    """
    configure_logging(os.environ.get("NAMEDYN_LOG_LEVEL", "INFO"))

    try:
        settings = load_settings()
    except ConfigError as e:
        logger.critical("%s", e)
        sys.exit(1)

    logger.info(
        "Managing A record %s every %ss",
        settings.hostname,
        settings.interval,
        extra={"hostname": settings.hostname},
    )

    try:
        run_forever(Reconciler(settings), interval=settings.interval)
    except KeyboardInterrupt:
        pass
