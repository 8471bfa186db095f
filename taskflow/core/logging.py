"""Logging and observability configuration using Pydantic Logfire.

All modules use Python's standard logging library (logging.getLogger(__name__));
Logfire captures and enriches these logs once configured.

Standard usage:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("Message", extra={"key": "value"})

Structured logging utilities:
    log_with_context(logger, "info", "Task created", task_id=1, priority="High")
"""

import logging

import logfire

from taskflow.core.config import Settings, constants, settings


def configure_logfire(app_settings: Settings | None = None) -> None:
    """Configure Pydantic Logfire with token from environment.

    Nothing is sent to Logfire unless a token is configured.

    Raises:
        ValueError: If require_logfire is set and no token is configured
    """
    app_settings = app_settings or settings
    token = app_settings.logfire_token
    if app_settings.require_logfire:
        token = app_settings.require_credential("logfire_token", "Logfire")

    logfire.configure(
        token=token,
        service_name=app_settings.service_name,
        service_version=constants.SERVICE_VERSION,
        environment=app_settings.environment,
        send_to_logfire="if-token-present",
    )

    logger = logging.getLogger(__name__)
    logger.info("Logfire configured successfully")


def span(name: str) -> logfire.LogfireSpan:
    """Create a custom span for service layer functions.

    Usage:
        with span("task_store.create"):
            # Your service logic here
            pass
    """
    return logfire.span(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: object,
) -> None:
    """Log a message with structured context fields.

    Args:
        logger: Logger instance to use
        level: Log level ("debug", "info", "warning", "error", "critical")
        message: Log message
        **context: Additional context fields (task_id, actor, from_kind, etc.)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=context)
