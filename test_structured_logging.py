"""
Test Structured Logging
=======================

Usage:
    pytest test_structured_logging.py
"""

import io
import json
import logging

from geoview_geojson.logging import LogEvent, StructuredLogger, attach_stream_handler, create_logger
from geoview_geojson.logging.events import ERROR_EVENTS, GEOJSON_EVENTS, WKT_EVENTS


def test_info_entry_fields(caplog):
    logger = StructuredLogger("cli", logger_name="geoview_geojson.test.log_info")
    with caplog.at_level(logging.INFO, logger="geoview_geojson.test.log_info"):
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded formatter config",
            metadata={'indent': 2}
        )

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["level"] == "INFO"
    assert entry["component"] == "cli"
    assert entry["event"] == "geojson.config.loaded"
    assert entry["metadata"] == {'indent': 2}
    assert "timestamp" in entry


def test_error_includes_exception_summary(caplog):
    logger = StructuredLogger("wkt", logger_name="geoview_geojson.test.log_error")
    with caplog.at_level(logging.INFO, logger="geoview_geojson.test.log_error"):
        logger.error(
            event=LogEvent.WKT_PARSE_ERROR,
            message="Failed to parse WKT",
            exc_info=ValueError("bad number")
        )

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["exception"] == {'type': 'ValueError', 'message': 'bad number'}
    assert "metadata" not in entry


def test_debug_suppressed_below_level(caplog):
    logger = StructuredLogger("formatter", logger_name="geoview_geojson.test.log_quiet")
    with caplog.at_level(logging.INFO, logger="geoview_geojson.test.log_quiet"):
        logger.debug(event=LogEvent.FORMAT_COMPLETED, message="Formatted Point")
    assert caplog.records == []


def test_set_level_enables_debug(caplog):
    logger = StructuredLogger("formatter", logger_name="geoview_geojson.test.log_level")
    logger.set_level(logging.DEBUG)
    caplog.set_level(logging.DEBUG, logger="geoview_geojson.test.log_level")
    logger.debug(event=LogEvent.FORMAT_COMPLETED, message="Formatted Point")
    assert json.loads(caplog.records[-1].getMessage())["level"] == "DEBUG"


def test_create_logger_default_name():
    logger = create_logger("formatter")
    assert logger.logger_name == "geoview_geojson.formatter"
    assert logger.logger.handlers


def test_event_categories_cover_all_events():
    assert GEOJSON_EVENTS | WKT_EVENTS | ERROR_EVENTS == set(LogEvent)


def test_library_logger_has_only_null_handler():
    logger = create_logger("quiet_default")
    assert all(isinstance(h, logging.NullHandler) for h in logger.logger.handlers)


def test_level_left_alone_when_not_given():
    logging.getLogger("geoview_geojson.test.log_keep").setLevel(logging.WARNING)
    StructuredLogger("formatter", logger_name="geoview_geojson.test.log_keep")
    assert logging.getLogger("geoview_geojson.test.log_keep").level == logging.WARNING


def test_attach_stream_handler_writes_json_lines():
    stream = io.StringIO()
    handler = attach_stream_handler(stream, logger_name="geoview_geojson.test.log_stream")
    try:
        logger = StructuredLogger(
            "wkt",
            level=logging.INFO,
            logger_name="geoview_geojson.test.log_stream.wkt",
        )
        logger.info(event=LogEvent.WKT_PARSED, message="Parsed WKT geometry")
    finally:
        logging.getLogger("geoview_geojson.test.log_stream").removeHandler(handler)

    entry = json.loads(stream.getvalue().splitlines()[0])
    assert entry["event"] == "wkt.parsed"
    assert entry["component"] == "wkt"
