"""
Logging Configuration
=====================
One call at start-up wires the 'barycentricexplorer' logger tree.

Modules never configure logging themselves; they only do
`logger = logging.getLogger(__name__)`. Routine recalculation (projections,
rebalancing) logs at DEBUG, skipped updates on a degenerate triangle at
WARNING and resets at INFO, so INFO is a quiet default while interacting.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "barycentricexplorer"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

# Rendering libraries that are chatty below WARNING
THIRD_PARTY_LOGGERS = ("pyvista", "vtkmodules")


def setup_logging(level: int | str = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler (and optionally a file handler) to the package logger.

    Args:
        level: A logging level or its name ("DEBUG", "info", ...).
        log_file: Optional path; the file is overwritten on every start.

    Returns:
        The configured package logger.

    Raises:
        ValueError: If `level` is a name logging does not know.
    """
    if isinstance(level, str):
        name = level.upper()
        resolved = logging.getLevelName(name)
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level '{level}'")
        level = resolved

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # A second call (tests, re-created window) replaces the handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.debug(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
