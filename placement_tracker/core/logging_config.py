"""Logging setup for the placement_tracker namespace."""

import logging
import sys

LOGGER_NAME = "placement_tracker"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure console logging. Returns the project logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    # Reloads (uvicorn --reload, repeated app creation in tests) must not stack handlers
    if not logger.handlers:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        logger.addHandler(console)

    return logger
