"""Structured logging via structlog.

Packaging modules log through the stdlib (`logging.getLogger(__name__)`);
configure_structlog() sets up structlog once per process and bridges the
stdlib loggers so both share one output stream.

Renderer selection (debug defaults to Settings.debug):
  debug=True:  `ConsoleRenderer` for local runs.
  debug=False: `JSONRenderer` for packaging workers.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from scriptdist.core.config import get_settings


def configure_structlog(debug: Optional[bool] = None) -> None:
    """Configure structlog for the process lifetime.

    Calling multiple times is safe; the last call wins.
    """
    if debug is None:
        debug = get_settings().debug

    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )
