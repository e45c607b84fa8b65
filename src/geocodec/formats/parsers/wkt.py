"""Parse WKT (Well-Known Text) into Features.

Handles POINT, MULTIPOINT, LINESTRING, MULTILINESTRING, POLYGON,
MULTIPOLYGON and GEOMETRYCOLLECTION. Keywords are case-insensitive and
line breaks are treated as spaces.

A GEOMETRYCOLLECTION decodes to a list of Features, one per member. Any
other type decodes to a single Feature. A nested collection member becomes
a Feature whose geometry is a Collection.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Union

from loguru import logger

from geocodec.formats.errors import WKTDecodeError
from geocodec.formats.wkt_keywords import DEFAULT_MAX_DEPTH, KEYWORD_KINDS
from geocodec.geometry import (
    Collection,
    Feature,
    Geometry,
    GeometryKind,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geocodec.geometry.transform import CoordinateTransformer, maybe_transform

_TYPE_STR = re.compile(r"^(\w+)\s*\((.*)\)$", re.DOTALL)
_SPACES = re.compile(r"\s+")
_PAREN_COMMA = re.compile(r"\)\s*,\s*\(")
_DOUBLE_PAREN_COMMA = re.compile(r"\)\s*\)\s*,\s*\(\s*\(")

WKTResult = Union[Feature, list[Feature]]


def parse_wkt(
    wkt_string: str,
    *,
    transformer: Optional[CoordinateTransformer] = None,
    external_crs: Optional[str] = None,
    internal_crs: Optional[str] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Optional[WKTResult]:
    """Parse a WKT string into a Feature or a list of Features.

    Args:
        wkt_string: Raw WKT text.
        transformer: Optional reprojection service.
        external_crs: CRS of the WKT text.
        internal_crs: CRS the decoded geometries should be in.
        max_depth: Maximum GEOMETRYCOLLECTION nesting.

    Returns:
        A Feature, a list of Features for GEOMETRYCOLLECTION, or None when
        the text is malformed or names an unsupported type.
    """
    try:
        result = read_wkt(wkt_string, max_depth=max_depth)
    except WKTDecodeError as e:
        logger.debug(f"WKT decode failed: {e}")
        return None

    features = result if isinstance(result, list) else [result]
    for feature in features:
        feature.geometry = maybe_transform(
            feature.geometry, transformer, external_crs, internal_crs,
        )
    return result


def read_wkt(wkt_string: str, max_depth: int = DEFAULT_MAX_DEPTH) -> WKTResult:
    """Strict form of parse_wkt without reprojection.

    Raises:
        WKTDecodeError: If the text cannot be decoded.
    """
    return _read(wkt_string, depth=0, max_depth=max_depth)


def split_collection_members(body: str) -> list[str]:
    """Split a GEOMETRYCOLLECTION body at commas outside any parentheses.

    Raises:
        WKTDecodeError: If the parentheses are unbalanced.
    """
    members: list[str] = []
    depth = 0
    start = 0
    for idx, char in enumerate(body):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise WKTDecodeError("unbalanced ')' in GEOMETRYCOLLECTION")
        elif char == "," and depth == 0:
            members.append(body[start:idx].strip())
            start = idx + 1
    if depth != 0:
        raise WKTDecodeError("unbalanced '(' in GEOMETRYCOLLECTION")

    tail = body[start:].strip()
    if tail or members:
        members.append(tail)
    return members


def _read(wkt_string: str, depth: int, max_depth: int) -> WKTResult:
    if not isinstance(wkt_string, str):
        raise WKTDecodeError(f"expected str, got {type(wkt_string).__name__}")

    text = wkt_string.replace("\n", " ").replace("\r", " ").strip()
    match = _TYPE_STR.match(text)
    if match is None:
        raise WKTDecodeError(f"not a WKT geometry: {text[:60]!r}")

    keyword = match.group(1).lower()
    body = match.group(2).strip()
    kind = KEYWORD_KINDS.get(keyword)
    if kind is None:
        raise WKTDecodeError(f"unsupported WKT type: {keyword.upper()}")

    if kind is GeometryKind.COLLECTION:
        if depth >= max_depth:
            raise WKTDecodeError(f"GEOMETRYCOLLECTION nested deeper than {max_depth}")
        return [
            _read_member(member, depth + 1, max_depth)
            for member in split_collection_members(body)
        ]

    return Feature(geometry=_PARSERS[kind](body))


def _read_member(member: str, depth: int, max_depth: int) -> Feature:
    """Decode one collection member as a full WKT string."""
    result = _read(member, depth, max_depth)
    if isinstance(result, list):
        return Feature(geometry=Collection([f.geometry for f in result]))
    return result


def _trim_parens(fragment: str) -> str:
    """Strip one optional pair of wrapping parentheses."""
    fragment = fragment.strip()
    if fragment.startswith("("):
        fragment = fragment[1:]
    if fragment.endswith(")"):
        fragment = fragment[:-1]
    return fragment


def _parse_point(body: str) -> Point:
    coords = _SPACES.split(body.strip())
    if len(coords) < 2:
        raise WKTDecodeError(f"point needs two coordinates: {body!r}")
    try:
        return Point(float(coords[0]), float(coords[1]))
    except ValueError as e:
        raise WKTDecodeError(f"non-numeric coordinate in {body!r}") from e


def _parse_multipoint(body: str) -> MultiPoint:
    points = body.strip().split(",")
    return MultiPoint([_parse_point(_trim_parens(p)) for p in points])


def _parse_linestring(body: str) -> LineString:
    points = body.strip().split(",")
    if len(points) < 2:
        raise WKTDecodeError(f"line needs at least two points: {body!r}")
    return LineString([_parse_point(p) for p in points])


def _parse_multilinestring(body: str) -> MultiLineString:
    lines = _PAREN_COMMA.split(body.strip())
    return MultiLineString([_parse_linestring(_trim_parens(line)) for line in lines])


def _parse_polygon(body: str) -> Polygon:
    rings = []
    for ring in _PAREN_COMMA.split(body.strip()):
        linestring = _parse_linestring(_trim_parens(ring))
        rings.append(LinearRing(linestring.components))
    return Polygon(rings)


def _parse_multipolygon(body: str) -> MultiPolygon:
    polygons = _DOUBLE_PAREN_COMMA.split(body.strip())
    return MultiPolygon([_parse_polygon(_trim_parens(p)) for p in polygons])


_PARSERS: dict[GeometryKind, Callable[[str], Geometry]] = {
    GeometryKind.POINT: _parse_point,
    GeometryKind.MULTIPOINT: _parse_multipoint,
    GeometryKind.LINESTRING: _parse_linestring,
    GeometryKind.MULTILINESTRING: _parse_multilinestring,
    GeometryKind.POLYGON: _parse_polygon,
    GeometryKind.MULTIPOLYGON: _parse_multipolygon,
}
