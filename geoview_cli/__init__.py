"""
GeoView CLI - Command-line interface for GeoJSON geometry output.

This package provides a CLI that reads WKT geometries and writes GeoJSON
geometry text to stdout.

Usage:
    geoview-geojson "POINT (-105 39.5)"
    geoview-geojson --pretty "POLYGON ((0 0, 1 0, 1 1, 0 0))"
    geoview-geojson --config config/geojson.yaml --file shapes.wkt
"""

__version__ = "1.0.0"
