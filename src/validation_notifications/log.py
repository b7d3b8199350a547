"""structlog configuration and a logging observer.

Two output modes for configure_logging():
- Human (default): console-rendered output to stderr
- JSON (log_json=True): structured JSON lines to stderr

The library never configures logging on import; applications call
configure_logging() or wire structlog themselves.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from validation_notifications.events import NotificationEvent, NotificationObserver

__all__ = ["LoggingObserver", "configure_logging"]

LOGGER_NAME = "validation_notifications"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and route this package's logs to stderr.

    Only the ``validation_notifications`` logger is touched: it gets one
    stderr handler and stops propagating, so the root logger and any
    handlers the application installed are left as they were. Calling
    this again replaces the handler installed by the previous call.

    The structlog processor chain is process-wide, as structlog.configure()
    always is.

    Args:
        verbose: Enable DEBUG-level output for this package. When False,
            only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(LOGGER_NAME)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(LOGGER_NAME)
    for existing in list(package_logger.handlers):
        if existing.get_name() == LOGGER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


class LoggingObserver(NotificationObserver):
    """Observer that logs every notifier event at debug level.

    Example:
        configure_logging(verbose=True)

        rules = ValidationRules[User]()
        rules.add_observer(LoggingObserver())
        rules.is_email("Email", "nope")
        # debug  notification_added  key=Email message="The 'nope' is not a valid email"
    """

    def __init__(self, logger: Any = None) -> None:
        """Initialize the observer.

        Args:
            logger: A structlog-compatible logger. Defaults to the package
                logger.
        """
        self._logger = logger or structlog.get_logger(LOGGER_NAME)

    def on_event(self, event: NotificationEvent) -> None:
        """Log the event name with its data as key-value pairs.

        Args:
            event: The event to log.
        """
        self._logger.debug(
            event.event_type.name.lower(),
            notifier=type(event.source).__name__,
            **event.data,
        )
