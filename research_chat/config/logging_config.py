"""Structured logging for the research chat backend."""

import logging
import sys

import structlog

# Model provider SDKs log every HTTP round trip at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "urllib3", "google", "grpc", "openai", "anthropic")


def resolve_level(debug_mode: bool = False, log_level: str = "INFO") -> int:
    """Numeric level for a level name; debug mode always wins."""
    if debug_mode:
        return logging.DEBUG
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(debug_mode: bool = False, log_level: str = "INFO", json_logs: bool = False) -> int:
    """Route stdlib and structlog output to stdout at one level.

    ``json_logs`` switches the console renderer for one JSON object per line.
    Returns the numeric level that was applied.
    """
    level = resolve_level(debug_mode, log_level)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    if json_logs:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
        timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )
        timestamper = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        timestamper,
    ]
    if json_logs:
        processors.append(structlog.processors.format_exc_info)
    else:
        processors.append(structlog.dev.set_exc_info)
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return level
