"""structlog on top of stdlib logging.

Events go through ``logging.getLogger(<module>)`` so levels set on the
``academy`` logger (and pytest's caplog) see them. Dev gets the console
renderer, everything else one JSON object per line.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from academy.settings import Settings

# Chatty on every request; we only want their warnings
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def setup_logging(settings: "Settings") -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.is_development:
        # console renderer formats exc_info itself
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger("academy").setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
