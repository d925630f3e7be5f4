"""Logging setup shared by the CLI and scripts."""

import logging

from .config import LoggingConfig

# Loggers of the HTTP stack used by RoninRestClient
HTTP_LOGGERS = ("requests", "urllib3", "charset_normalizer")


def setup_logging(config: LoggingConfig, level: str | None = None) -> int:
    """
    Configure logging for an export run.

    HTTP client loggers stay at WARNING unless the run itself is at DEBUG,
    in which case connection-level traces are shown as well.

    Args:
        config: Logging section of the export configuration
        level: Level overriding config.level (e.g. from --log-level)

    Returns:
        The numeric level applied to the root logger
    """
    numeric_level = getattr(logging, (level or config.level).upper())

    logging.basicConfig(
        level=numeric_level,
        format=config.format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("ronin_export").setLevel(numeric_level)

    http_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)

    return numeric_level
