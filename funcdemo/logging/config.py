"""
Centralized logging configuration for the demo runner.

All components log through structlog on top of the standard library
logging module. Log output goes to stderr so it never mixes with the
demo output stream on stdout.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_demo_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with the demo runner context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for demo execution
    """
    logger = get_logger(name)
    return logger.bind(subsystem="demo_runner")


def log_demo_result(
    logger: FilteringBoundLogger,
    demo_name: str,
    succeeded: bool,
    line_count: int,
    duration_ms: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a finished demo with standardized fields.

    Args:
        logger: Structlog logger instance
        demo_name: Name of the demo that ran
        succeeded: Whether the demo completed without error
        line_count: Number of output lines the demo wrote
        duration_ms: Wall-clock duration of the demo
        context: Additional context data
    """
    bound_logger = logger.bind(
        demo_name=demo_name,
        status="SUCCESS" if succeeded else "FAILED",
        line_count=line_count,
        duration_ms=round(duration_ms, 3),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if succeeded:
        bound_logger.info("Demo completed")
    else:
        bound_logger.warning("Demo failed")
