"""Geometry interchange — WKT and Route JSON codecs over a shared model.

The geometry model lives in ``geocodec.geometry``; the codecs live in
``geocodec.formats``. Codecs depend on the model, never the reverse.
"""

from geocodec.geometry import (
    Collection,
    Feature,
    GeometryKind,
    LinearRing,
    LineString,
    MeasuredPoint,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Route,
)
from geocodec.formats import (
    export_route_json,
    export_wkt,
    parse_route_json,
    parse_wkt,
)

__all__ = [
    "Collection",
    "Feature",
    "GeometryKind",
    "LinearRing",
    "LineString",
    "MeasuredPoint",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Route",
    "export_route_json",
    "export_wkt",
    "parse_route_json",
    "parse_wkt",
]
