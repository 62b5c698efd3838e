"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

This module provides a structured logger that outputs JSON logs.

Design:
- JSON output (one object per line)
- Thread-safe (uses standard logging module)
- Contextual metadata (shape type, vertex count, source file, etc.)
- Type-safe events (LogEvent enum)

Architecture:
- Wraps Python's logging module
- Adds structured metadata
- Formats as JSON for stderr/file

Example:
    >>> logger = StructuredLogger(component="formatter")
    >>> logger.debug(
    ...     event=LogEvent.FORMAT_COMPLETED,
    ...     message="Formatted Polygon",
    ...     metadata={'shape_type': 'Polygon', 'npts': 25}
    ... )

Output:
    {
        "timestamp": "2026-10-19T15:30:45.123456+00:00",
        "level": "DEBUG",
        "component": "formatter",
        "event": "geojson.format.completed",
        "message": "Formatted Polygon",
        "metadata": {"shape_type": "Polygon", "npts": 25}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional, TextIO
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Wraps Python's logging module with structured metadata support.

    Attributes:
        component: Component name (e.g., "formatter", "wkt", "cli")
        logger: Underlying Python logger instance

    Thread Safety:
        Thread-safe via Python's logging module.
    """

    def __init__(
        self,
        component: str,
        level: Optional[int] = None,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "formatter")
            level: Logging level (default: None, leave the logger's level as is)
            logger_name: Custom logger name (default: geoview_geojson.<component>)

        The library never writes records itself: a logger without handlers
        gets a NullHandler. Applications opt in with attach_stream_handler().
        """
        self.component = component
        self.logger_name = logger_name or f"geoview_geojson.{component}"
        self.logger = logging.getLogger(self.logger_name)
        if level is not None:
            self.logger.setLevel(level)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Internal log method with structured format.

        Args:
            level: Log level name (DEBUG, INFO, WARNING, ERROR)
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception for ERROR logs
        """
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        # default=str keeps numpy scalars and paths serializable
        self.logger.log(log_level, json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context

        Example:
            >>> logger.info(
            ...     event=LogEvent.CONFIG_LOADED,
            ...     message="Loaded formatter config",
            ...     metadata={'path': 'geojson.yaml'}
            ... )
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log WARNING level message."""
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance, summarized under "exception"

        Example:
            >>> try:
            ...     formatter.format(shape)
            ... except UnrecognizedGeometryError as e:
            ...     logger.error(
            ...         event=LogEvent.UNRECOGNIZED_GEOMETRY,
            ...         message="Cannot format shape",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """
        Change logging level dynamically.

        Args:
            level: New logging level (logging.DEBUG, INFO, WARNING, ERROR)
        """
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Formatter that passes StructuredLogger's JSON payload through.

    Used internally by StructuredLogger.
    """

    def format(self, record: logging.LogRecord) -> str:
        # The message from StructuredLogger is already JSON
        return record.getMessage()


def create_logger(
    component: str,
    level: Optional[int] = None
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Args:
        component: Component identifier
        level: Logging level (default: None, keep the current level)

    Returns:
        Configured StructuredLogger instance

    Example:
        >>> logger = create_logger("formatter", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)


def attach_stream_handler(
    stream: Optional[TextIO] = None,
    logger_name: str = "geoview_geojson"
) -> logging.Handler:
    """
    Send JSON log lines from logger_name (and its children) to a stream.

    Args:
        stream: Target stream (default: sys.stderr)
        logger_name: Logger to attach to (default: package root logger)

    Returns:
        The attached handler, for removeHandler() when done

    Example:
        >>> handler = attach_stream_handler(sys.stderr)
        >>> ...
        >>> logging.getLogger("geoview_geojson").removeHandler(handler)
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter())
    logging.getLogger(logger_name).addHandler(handler)
    return handler
