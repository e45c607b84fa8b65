"""Export geometries and Features to GeoJSON dicts (RFC 7946).

This is the view a rendering client consumes. Coordinates are written as
[x, y]; measures have no GeoJSON form and are dropped. Collections and
Routes become GeometryCollections.
"""

from __future__ import annotations

from typing import Any, Iterable

from geocodec.geometry import Feature, Geometry, GeometryKind

_GEOJSON_TYPES = {
    GeometryKind.POINT: "Point",
    GeometryKind.MULTIPOINT: "MultiPoint",
    GeometryKind.LINESTRING: "LineString",
    GeometryKind.LINEARRING: "LineString",
    GeometryKind.MULTILINESTRING: "MultiLineString",
    GeometryKind.POLYGON: "Polygon",
    GeometryKind.MULTIPOLYGON: "MultiPolygon",
}


def export_geojson(features: Iterable[Feature]) -> dict:
    """Export Features to a GeoJSON FeatureCollection dict.

    Args:
        features: The Features to export.

    Returns:
        Dict representing a GeoJSON FeatureCollection.
    """
    return {
        "type": "FeatureCollection",
        "features": [_feature_to_geojson(f) for f in features],
    }


def geometry_to_geojson(geometry: Geometry) -> dict:
    """Convert a single geometry to a GeoJSON geometry dict."""
    if geometry.kind in (GeometryKind.COLLECTION, GeometryKind.ROUTE):
        return {
            "type": "GeometryCollection",
            "geometries": [geometry_to_geojson(g) for g in geometry.components],
        }
    return {
        "type": _GEOJSON_TYPES[geometry.kind],
        "coordinates": _coordinates(geometry),
    }


def _feature_to_geojson(feature: Feature) -> dict:
    """Convert a Feature to a GeoJSON Feature dict."""
    gj_feature: dict[str, Any] = {
        "type": "Feature",
        "geometry": geometry_to_geojson(feature.geometry),
        "properties": dict(feature.properties),
    }
    if feature.feature_id is not None:
        gj_feature["id"] = feature.feature_id
    return gj_feature


def _coordinates(geometry: Geometry) -> list:
    if geometry.kind is GeometryKind.POINT:
        return [geometry.x, geometry.y]
    return [_coordinates(c) for c in geometry.components]
