"""
Logging configuration for the bonding curve library.

The library only emits structured events (overflow, non-finite lossy prices,
factory construction, safety findings); it never configures logging on import.
Applications call ``configure_logging`` once to render those events through the
standard library logger named ``bonding_curves``.
"""
import logging
import sys

import structlog
from structlog.types import FilteringBoundLogger

LIBRARY_LOGGER_NAME = "bonding_curves"


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    cache_logger_on_first_use: bool = False,
) -> None:
    """
    Route the library's structlog events through the standard library.

    Args:
        level: Level of the ``bonding_curves`` logger. Overflow events are DEBUG,
            non-finite prices WARNING.
        format_json: If True, render one JSON object per event; otherwise key=value text
        include_timestamp: Add an ISO timestamp to each event
        cache_logger_on_first_use: Freeze logger configuration after first use
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown logging level {level!r}")

    # no-op when the host application already configured the root logger
    logging.basicConfig(stream=sys.stdout, format="%(message)s")
    logging.getLogger(LIBRARY_LOGGER_NAME).setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if format_json else structlog.dev.ConsoleRenderer(colors=False),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_logger_on_first_use,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Returns a structlog logger; pass the module's ``__name__``."""
    return structlog.get_logger(name)
