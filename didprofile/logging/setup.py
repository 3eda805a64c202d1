"""Structlog configuration for didprofile."""

import logging
import sys

import structlog

from didprofile.config import ServiceConfig, LogFormat

# Keys whose values must never reach a log line
REDACTED_KEYS = frozenset({"password", "access_token", "accessJwt", "refreshJwt", "authorization", "secret"})


def redact_secrets(logger, method_name, event_dict):
    """Mask credential-bearing fields."""
    for key in REDACTED_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def configure_logging(config: ServiceConfig | None = None) -> None:
    """
    Configure structlog with appropriate processors and output format.

    Args:
        config: ServiceConfig instance, uses defaults if None
    """
    if config is None:
        config = ServiceConfig()

    # Set up standard library logging
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    # Common processors
    processors: list = [
        structlog.contextvars.merge_contextvars,
        redact_secrets,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    # One JSON object per line for log shippers
    if config.log_format == LogFormat.JSON:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=True),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a configured structlog logger.

    Args:
        name: Optional logger name for context

    Returns:
        Configured structlog BoundLogger
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger


def bind_invocation_context(context=None, **values) -> None:
    """
    Start a fresh log context for one invocation.

    Everything bound here is merged into each log line until the next call.

    Args:
        context: Lambda context object; its request id and function name are bound
        **values: Extra fields to bind
    """
    structlog.contextvars.clear_contextvars()
    if context is not None:
        values.setdefault("aws_request_id", getattr(context, "aws_request_id", None))
        values.setdefault("function_name", getattr(context, "function_name", None))
    structlog.contextvars.bind_contextvars(
        **{key: value for key, value in values.items() if value is not None}
    )
