"""
Common utilities for CLI commands
"""
import logging
from typing import Optional

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Transport loggers that only matter when debugging requests
TRANSPORT_LOGGERS = ("urllib3", "requests")


def setup_logging(
    debug: bool = False,
    logger_name: str = "speechlocales",
    log_format: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging for the locale table commands

    Info level shows one line per fetch and per generated table. Debug
    level adds request URLs and the transport's connection logs, which
    stay at WARNING otherwise.

    Args:
        debug: Whether to enable debug mode
        logger_name: Name of the package logger to configure
        log_format: Custom log format string

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format=log_format or DEFAULT_LOG_FORMAT)

    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(
            logging.DEBUG if debug else logging.WARNING
        )

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.debug("Debug logging enabled for %s", logger_name)
    return logger


def build_config_kwargs(**overrides) -> dict:
    """
    Drop unset CLI options so config defaults come from the environment

    Returns:
        Keyword arguments for the config class
    """
    return {key: value for key, value in overrides.items() if value is not None}
