"""Logging setup: stdlib logging with structlog routed through it."""

import logging

import structlog

from infrastructure.config import get_log_level

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging and structlog once per process.

    Args:
        level: Log level name; defaults to LOG_LEVEL env var
    """
    global _configured
    if _configured:
        return

    level_name = (level or get_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _configured = True
