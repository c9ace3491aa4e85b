"""Logging setup for the pingsync CLI."""

import logging

from pingsync.core.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging once for the process.

    Args:
        verbose: Force DEBUG level (otherwise PINGSYNC_LOG_LEVEL applies)
    """
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)

    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
