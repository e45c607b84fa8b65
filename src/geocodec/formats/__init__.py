"""Text codecs for the geometry model: WKT and Route JSON.

Parsers turn text into model instances; exporters do the reverse.
"""

from geocodec.formats.errors import (
    GeocodecError,
    RouteSchemaError,
    WKTDecodeError,
    WKTEncodeError,
)
from geocodec.formats.exporters.route_json import export_route_json
from geocodec.formats.exporters.wkt import export_wkt
from geocodec.formats.parsers.route_json import parse_route_json
from geocodec.formats.parsers.wkt import parse_wkt

__all__ = [
    "GeocodecError",
    "RouteSchemaError",
    "WKTDecodeError",
    "WKTEncodeError",
    "export_route_json",
    "export_wkt",
    "parse_route_json",
    "parse_wkt",
]
