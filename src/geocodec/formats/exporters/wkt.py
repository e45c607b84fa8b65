"""Export Features or geometries to WKT (Well-Known Text).

A list or tuple is written as a GEOMETRYCOLLECTION; a single Feature or
geometry is written bare. LinearRing and Route have no WKT keyword and
export as None, as does any collection containing one.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Union

from loguru import logger

from geocodec.formats.errors import WKTEncodeError
from geocodec.formats.wkt_keywords import DEFAULT_MAX_DEPTH, WKT_KEYWORDS
from geocodec.geometry import (
    Collection,
    Feature,
    Geometry,
    GeometryKind,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geocodec.geometry.transform import CoordinateTransformer, maybe_transform

Exportable = Union[Feature, Geometry]


def export_wkt(
    features: Union[Exportable, Sequence[Exportable]],
    *,
    transformer: Optional[CoordinateTransformer] = None,
    external_crs: Optional[str] = None,
    internal_crs: Optional[str] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Optional[str]:
    """Export one feature, or a sequence of features, to a WKT string.

    Args:
        features: A Feature or geometry, or a list/tuple of them.
        transformer: Optional reprojection service.
        external_crs: CRS the WKT text should be in.
        internal_crs: CRS of the in-memory geometries.
        max_depth: Maximum GEOMETRYCOLLECTION nesting, the wrapping
            collection of a list included.

    Returns:
        WKT text, or None if any geometry has no WKT form or collections
        nest deeper than max_depth.
    """
    if isinstance(features, (list, tuple)):
        pieces = []
        for item in features:
            text = extract_geometry(
                _geometry_of(item),
                transformer=transformer,
                external_crs=external_crs,
                internal_crs=internal_crs,
                max_depth=max_depth - 1,
            )
            if text is None:
                return None
            pieces.append(text)
        return f"GEOMETRYCOLLECTION({','.join(pieces)})"

    return extract_geometry(
        _geometry_of(features),
        transformer=transformer,
        external_crs=external_crs,
        internal_crs=internal_crs,
        max_depth=max_depth,
    )


def extract_geometry(
    geometry: Geometry,
    *,
    transformer: Optional[CoordinateTransformer] = None,
    external_crs: Optional[str] = None,
    internal_crs: Optional[str] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Optional[str]:
    """Build the WKT for a single geometry.

    When reprojecting, a clone is transformed so the input is never mutated.
    """
    if _collection_depth(geometry) > max_depth:
        logger.debug(f"WKT encode failed: GEOMETRYCOLLECTION nested deeper than {max_depth}")
        return None
    if transformer is not None and external_crs and internal_crs:
        geometry = maybe_transform(
            geometry.clone(), transformer, internal_crs, external_crs,
        )
    try:
        return _extract(geometry)
    except WKTEncodeError as e:
        logger.debug(f"WKT encode failed: {e}")
        return None


def format_number(value: float) -> str:
    """Shortest text that reads back to the same float.

    Integral values are written without a fractional part.
    """
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _geometry_of(item: Exportable) -> Geometry:
    if isinstance(item, Feature):
        return item.geometry
    return item


def _collection_depth(geometry: Geometry) -> int:
    """Deepest chain of nested Collections, counted without recursion."""
    deepest = 0
    stack = [(geometry, 0)]
    while stack:
        node, depth = stack.pop()
        if getattr(node, "kind", None) is GeometryKind.COLLECTION:
            depth += 1
            deepest = max(deepest, depth)
            stack.extend((member, depth) for member in node.components)
    return deepest


def _extract(geometry: Geometry) -> str:
    kind = getattr(geometry, "kind", None)
    keyword = WKT_KEYWORDS.get(kind)
    extractor = _EXTRACTORS.get(kind)
    if keyword is None or extractor is None:
        raise WKTEncodeError(f"no WKT form for {type(geometry).__name__}")
    return f"{keyword}({extractor(geometry)})"


def _extract_point(point: Point) -> str:
    return f"{format_number(point.x)} {format_number(point.y)}"


def _extract_multipoint(multipoint: MultiPoint) -> str:
    return ",".join(f"({_extract_point(p)})" for p in multipoint.components)


def _extract_linestring(linestring: LineString) -> str:
    return ",".join(_extract_point(p) for p in linestring.components)


def _extract_multilinestring(multilinestring: MultiLineString) -> str:
    return ",".join(f"({_extract_linestring(line)})" for line in multilinestring.components)


def _extract_polygon(polygon: Polygon) -> str:
    return ",".join(f"({_extract_linestring(ring)})" for ring in polygon.components)


def _extract_multipolygon(multipolygon: MultiPolygon) -> str:
    return ",".join(f"({_extract_polygon(p)})" for p in multipolygon.components)


def _extract_collection(collection: Collection) -> str:
    return ",".join(_extract(member) for member in collection.components)


_EXTRACTORS: dict[GeometryKind, Callable[..., str]] = {
    GeometryKind.POINT: _extract_point,
    GeometryKind.MULTIPOINT: _extract_multipoint,
    GeometryKind.LINESTRING: _extract_linestring,
    GeometryKind.MULTILINESTRING: _extract_multilinestring,
    GeometryKind.POLYGON: _extract_polygon,
    GeometryKind.MULTIPOLYGON: _extract_multipolygon,
    GeometryKind.COLLECTION: _extract_collection,
}
