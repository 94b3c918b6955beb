"""Logging setup for applications embedding the transit line core.

Library modules only call logging.getLogger(__name__) and pass context
through ``extra``. Entry points call configure_logging() once to attach a
stdout handler to the root logger: a plain text formatter by default, or
structlog's ProcessorFormatter rendering JSON when structured logging is
enabled.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from .config import ObservabilityConfig, get_config


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the root logger from the observability settings.

    Args:
        config: Logging settings; defaults to the application config.
    """
    config = config or get_config().observability
    level = config.level.upper()

    formatter: logging.Formatter
    if config.structured:
        shared_processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
        ]
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
    else:
        formatter = logging.Formatter(config.format)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level, logging.INFO))
