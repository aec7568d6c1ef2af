"""
Logging Setup
=============
Structured logging for services embedding the OTP core.

Usage:
    from altrivo_core.logging_config import setup_logging

    setup_logging(service_name="auth-service")

Library modules log through ``structlog.get_logger(__name__)``; codes are
never logged, emails are.
"""

import logging
import sys

import structlog


def setup_logging(
    service_name: str,
    level: str = "INFO",
    json_output: bool = True,
):
    """
    Configure structlog and the standard library logging.

    Args:
        service_name: Name of the service (e.g., "auth-service")
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Emit JSON (production) instead of console output

    Returns:
        Logger bound to the service name
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Third-party libraries (httpx, sqlalchemy) still use stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    structlog.contextvars.bind_contextvars(service=service_name)
    logger = structlog.get_logger(service_name)
    logger.info("logging.configured", json_output=json_output)
    return logger
