"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)
- Searchable in log aggregators

Event Naming Convention:
    <component>.<category>.<action>

    component: geojson, wkt, error
    category: format, config, parsed
    action: completed, loaded
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - geojson.*: Formatting and formatter configuration
    - wkt.*: Well Known Text parsing
    - error.*: Error conditions
    """

    # ========== GeoJSON Events ==========
    FORMAT_COMPLETED = "geojson.format.completed"
    """Shape formatted as GeoJSON geometry text."""

    CONFIG_LOADED = "geojson.config.loaded"
    """Formatter configuration loaded from file."""

    # ========== WKT Events ==========
    WKT_PARSED = "wkt.parsed"
    """WKT text parsed into a shape."""

    # ========== Error Events ==========
    UNRECOGNIZED_GEOMETRY = "error.unrecognized_geometry"
    """Shape type has no GeoJSON emitter."""

    NON_FINITE_COORDINATE = "error.non_finite_coordinate"
    """NaN or infinite coordinate rejected."""

    WKT_PARSE_ERROR = "error.wkt_parse"
    """WKT text could not be parsed."""

    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""


# Event categories for filtering
GEOJSON_EVENTS = {
    LogEvent.FORMAT_COMPLETED,
    LogEvent.CONFIG_LOADED,
}

WKT_EVENTS = {
    LogEvent.WKT_PARSED,
}

ERROR_EVENTS = {
    LogEvent.UNRECOGNIZED_GEOMETRY,
    LogEvent.NON_FINITE_COORDINATE,
    LogEvent.WKT_PARSE_ERROR,
    LogEvent.CONFIG_ERROR,
}
