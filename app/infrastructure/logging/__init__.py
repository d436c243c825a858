"""Structured logging for the Identity Center actions (structlog).

    from infrastructure.logging import bind_request_context, get_module_logger

    logger = get_module_logger()

    with bind_request_context(action="remove_user_from_group"):
        logger.info("remove_user_from_group_started")
"""

from infrastructure.logging.setup import (
    build_processors,
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_request_context,
    get_correlation_id,
)

from infrastructure.logging.formatters import (
    REDACTED,
    add_build_info,
    is_secret_key,
    redact_credentials,
    truncate_long_values,
)

__all__ = [
    "build_processors",
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "REDACTED",
    "add_build_info",
    "is_secret_key",
    "redact_credentials",
    "truncate_long_values",
]
