"""Structured logging configuration."""

import logging
import sys


def setup_logging(level: str = "INFO", format_type: str = "structured") -> logging.Logger:
    """Setup structured logging for the slice engine."""

    # Convert string level to logging level
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL
    }
    log_level = level_map.get(level.upper(), logging.INFO)

    if format_type == "structured":
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    else:
        formatter = logging.Formatter(
            '%(levelname)s - %(message)s'
        )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # Library loggers live under the package names
    for name in ('pkgs.hyperbolic', 'pkgs.engine_runtime', 'apps.engine'):
        logging.getLogger(name).setLevel(log_level)

    return logging.getLogger('HeisenbergEngine')
