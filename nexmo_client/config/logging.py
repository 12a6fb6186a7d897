"""Logging configuration for the client."""

import json
import logging
import logging.config
import sys
import uuid
from contextvars import ContextVar
from typing import Dict, Any, Optional

from .settings import settings

# Context variable for the correlation ID of the API call in progress
correlation_id: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

_STANDARD_ATTRS = frozenset([
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'taskName', 'message',
    'exc_info', 'exc_text', 'stack_info', 'correlation_id',
    'endpoint', 'operation', 'error',
])


class CorrelationIdFormatter(logging.Formatter):
    """Formatter that includes the correlation ID in log records."""

    def format(self, record: logging.LogRecord) -> str:
        record.correlation_id = correlation_id.get() or "N/A"
        return super().format(record)


class StructuredFormatter(CorrelationIdFormatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as a single JSON line."""
        log_entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "correlation_id": correlation_id.get() or "N/A",
            "message": record.getMessage(),
        }

        if hasattr(record, 'endpoint'):
            log_entry['endpoint'] = record.endpoint
        if hasattr(record, 'operation'):
            log_entry['operation'] = record.operation
        if hasattr(record, 'error'):
            log_entry['error'] = record.error

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith('_'):
                log_entry[key] = value

        if record.exc_info:
            log_entry['exc_info'] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def get_logging_config() -> Dict[str, Any]:
    """Get logging configuration based on settings."""

    if settings.log_format == "json":
        formatter_config = {
            "()": "nexmo_client.config.logging.StructuredFormatter",
            "datefmt": "%Y-%m-%dT%H:%M:%S"
        }
    else:
        formatter_config = {
            "()": "nexmo_client.config.logging.CorrelationIdFormatter",
            "format": "%(asctime)s - %(correlation_id)s - %(name)s - %(levelname)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S"
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": formatter_config,
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": sys.stderr,
                "formatter": "default",
                "level": settings.log_level,
            },
        },
        "root": {
            "level": settings.log_level,
            "handlers": ["console"],
        },
        "loggers": {
            "nexmo_client": {
                "level": settings.log_level,
                "handlers": ["console"],
                "propagate": False,
            },
            "httpx": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging() -> None:
    """Setup logging configuration."""
    logging.config.dictConfig(get_logging_config())


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


def set_correlation_id(corr_id: str) -> None:
    """Set correlation ID in context."""
    correlation_id.set(corr_id)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return correlation_id.get()


class LoggingService:
    """Consistent logging for API operations."""

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)

    def log_operation(self, level: str, message: str, endpoint: Optional[str] = None,
                      operation: Optional[str] = None, error: Optional[str] = None, **kwargs) -> None:
        """Log operation with consistent format.

        Args:
            level: Log level (info, warning, error, debug)
            message: Log message
            endpoint: API endpoint involved in the operation
            operation: Operation name
            error: Error message if applicable
            **kwargs: Additional fields to log
        """
        extra = {}
        if endpoint:
            extra['endpoint'] = endpoint
        if operation:
            extra['operation'] = operation
        if error:
            extra['error'] = error

        extra.update(kwargs)

        log_method = getattr(self.logger, level.lower())
        log_method(message, extra=extra)

    def log_api_call(self, operation: str, endpoint: str, success: bool,
                     error: Optional[str] = None, **kwargs) -> None:
        """Log the outcome of an API call.

        Args:
            operation: Client operation name (search_numbers, check, ...)
            endpoint: Request URL
            success: Whether the call returned a usable result
            error: Error message if the call failed
            **kwargs: Additional fields
        """
        if success:
            self.log_operation(
                "info",
                f"{operation} completed successfully",
                endpoint=endpoint,
                operation=operation,
                **kwargs
            )
        else:
            self.log_operation(
                "error" if error else "warning",
                f"{operation} failed",
                endpoint=endpoint,
                operation=operation,
                error=error,
                **kwargs
            )

    def log_error(self, message: str, error: Exception, endpoint: Optional[str] = None,
                  operation: Optional[str] = None, **kwargs) -> None:
        """Log error with consistent format.

        Args:
            message: Error message
            error: Exception object
            endpoint: API endpoint if applicable
            operation: Operation name if applicable
            **kwargs: Additional fields
        """
        self.log_operation(
            "error",
            message,
            endpoint=endpoint,
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
            **kwargs
        )
