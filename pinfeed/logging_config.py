"""Structured logging configuration for the Pinterest feed proxy."""

import json
import logging
import sys
from datetime import UTC, datetime

CONTEXT_FIELDS = (
    "request_id",
    "component",
    "method",
    "path",
    "feed_url",
    "status_code",
    "content_length",
    "error",
)


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class RequestLogger:
    """Logger bound to a single proxied request."""

    def __init__(self, request_id: str, component: str = "app"):
        """Initialize request logger.

        Args:
            request_id: Unique identifier for this request
            component: Component name (e.g., 'fetcher', 'handler')
        """
        self.request_id = request_id
        self.component = component
        self.logger = logging.getLogger(f"pinfeed.{component}")

    def _log_with_context(
        self, level: int, message: str, exc_info: bool = False, **kwargs
    ) -> None:
        """Log message with request context."""
        extra = {
            "request_id": self.request_id,
            "component": self.component,
            **kwargs,
        }
        self.logger.log(level, message, exc_info=exc_info, extra=extra)

    def info(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.WARNING, message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        self._log_with_context(logging.ERROR, message, exc_info=exc_info, **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.DEBUG, message, **kwargs)


def setup_structured_logging(log_level: str = "INFO") -> None:
    """Setup structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter())
    root_logger.addHandler(console_handler)

    logger = logging.getLogger("pinfeed")
    logger.setLevel(level)
    logger.propagate = True


def create_request_logger(
    component: str, request_id: str | None = None
) -> RequestLogger:
    """Create a request logger for a component.

    Args:
        component: Component name
        request_id: Optional request ID (will generate one if not provided)

    Returns:
        RequestLogger instance
    """
    if not request_id:
        request_id = f"req_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"

    return RequestLogger(request_id, component)
