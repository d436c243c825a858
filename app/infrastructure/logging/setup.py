"""structlog setup for the Identity Center actions.

Logging is configured once, on import. Handlers take a logger bound to
their module with `get_module_logger()`; per-invocation fields (action,
user, group, correlation ID) come from `bind_request_context`.

Entries are rendered as JSON in production (empty `PREFIX`) and with the
console renderer otherwise. Under pytest nothing is emitted.
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration import settings
from infrastructure.logging.formatters import (
    add_build_info,
    redact_credentials,
    truncate_long_values,
)

APP_NAME = "identity-center-actions"

SILENT_LEVEL = logging.CRITICAL + 1


def _running_under_pytest() -> bool:
    return "pytest" in sys.modules


def build_processors(is_production: bool) -> List[Any]:
    """Processor chain for action log entries, renderer last.

    Exceptions are formatted before redaction and truncation so that a
    rendered traceback is redacted like any other value and kept whole.
    """
    if is_production:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        add_build_info(APP_NAME, settings.GIT_SHA),
        structlog.processors.format_exc_info,
        redact_credentials(),
        truncate_long_values(),
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Route structlog through the standard library root logger.

    Args:
        log_level: Level name (DEBUG, INFO, ...). Defaults to settings.LOG_LEVEL.
        is_production: JSON output when True. Defaults to settings.is_production.

    Returns:
        Root structlog logger
    """
    silent = _running_under_pytest()
    if silent:
        level = SILENT_LEVEL
        processors: List[Any] = [
            structlog.stdlib.add_log_level,
            structlog.processors.JSONRenderer(),
        ]
    else:
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)
        if is_production is None:
            is_production = settings.is_production
        processors = build_processors(is_production)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=silent)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger(module_name: Optional[str] = None) -> BoundLogger:
    """Logger bound with the `component` and `module_path` of a module.

    Args:
        module_name: Dotted module name. Defaults to the caller's `__name__`,
            so `modules.identity_center.membership` logs with
            component="membership".
    """
    if module_name is None:
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        if caller is not None:
            module_name = caller.f_globals.get("__name__")

    if not module_name:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
