import logging
import re
from typing import Any

import structlog
from structlog.types import Processor


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Configure structlog for the flowharness package"""

    # Leave an existing structlog setup alone (the host test suite may own it)
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
                isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            return

    shared_processors: list[Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_logs:
        # ConsoleRenderer pretty-prints exceptions itself
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    log_renderer: Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class HarnessStructLogger:
    """
    Structured logger for the flowharness package.

    Wraps a structlog stdlib logger; `bind` returns a new wrapper carrying the
    extra context, so each harness object keeps its own bound values.
    """

    def __init__(self, log_name: str = "flowharness", logger=None):
        self.logger = logger if logger is not None else structlog.stdlib.get_logger(log_name)

    @staticmethod
    def _to_snake_case(name):
        """Convert CamelCase to snake_case"""
        return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()

    def bind(self, *args, **new_values: Any) -> "HarnessStructLogger":
        """
        Return a logger with additional context values bound.

        Args:
            *args: Objects that have an 'identifier' attribute (keyed by their snake_case type name)
            **new_values: Key-value pairs to bind to the context
        """
        values = {}
        for arg in args:
            if hasattr(arg, 'identifier'):
                key = self._to_snake_case(type(arg).__name__)
                values[key] = arg.identifier
            else:
                self.logger.error(
                    "Unsupported argument when trying to log.",
                    argument_type=type(arg).__name__,
                )
        values.update(new_values)
        return HarnessStructLogger(logger=self.logger.bind(**values))

    def unbind(self, *keys: str) -> "HarnessStructLogger":
        """Return a logger without the given context keys"""
        return HarnessStructLogger(logger=self.logger.unbind(*keys))

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


def get_harness_logger(log_name: str = "flowharness") -> HarnessStructLogger:
    """Return a structured logger for a harness module."""
    return HarnessStructLogger(log_name)


def init_logger(settings):
    """
    Initialize the structured logger for the flowharness package.

    Args:
        settings: HarnessSettings with logging options

    Returns:
        HarnessStructLogger: Configured structured logger instance
    """
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level.value)
    return HarnessStructLogger("flowharness")
