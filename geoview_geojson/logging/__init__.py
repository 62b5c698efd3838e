"""
Structured Logging for GeoView GeoJSON
======================================

Bounded Context: Observability

This module provides JSON-structured logging for the formatter, the WKT
parser and the command-line front end.

Design:
- JSON output (parseable by log aggregators)
- Typed events (enums prevent typos)
- Contextual metadata (shape type, vertex count, etc.)
- Thread-safe
- Silent by default (NullHandler); applications attach a stream handler

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function
    attach_stream_handler: Route JSON log lines to a stream (applications)

Example:
    >>> from geoview_geojson.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="formatter")
    >>> logger.info(
    ...     event=LogEvent.CONFIG_LOADED,
    ...     message="Loaded formatter config",
    ...     metadata={'indent': 2}
    ... )

Output:
    {
        "timestamp": "2026-10-19T15:30:45.123456+00:00",
        "level": "INFO",
        "component": "formatter",
        "event": "geojson.config.loaded",
        "message": "Loaded formatter config",
        "metadata": {"indent": 2}
    }
"""

from .events import LogEvent
from .structured import StructuredLogger, attach_stream_handler, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
    'attach_stream_handler',
]
