"""Geometry model — points, lines, rings, polygons, multi-kinds, collections.

Plain value aggregates with a closed kind tag. No codec imports here.
"""

from geocodec.geometry.feature import Feature
from geocodec.geometry.model import (
    Collection,
    Geometry,
    GeometryKind,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Polygon,
    Route,
)
from geocodec.geometry.primitives import MeasuredPoint, Point

__all__ = [
    "Collection",
    "Feature",
    "Geometry",
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
]
