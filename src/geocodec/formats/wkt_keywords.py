"""WKT type keywords for each geometry kind the WKT grammar can carry.

LinearRing and Route have no keyword of their own: a ring only appears
inside a polygon, and a route has no WKT form.
"""

from geocodec.geometry import GeometryKind

WKT_KEYWORDS: dict[GeometryKind, str] = {
    GeometryKind.POINT: "POINT",
    GeometryKind.MULTIPOINT: "MULTIPOINT",
    GeometryKind.LINESTRING: "LINESTRING",
    GeometryKind.MULTILINESTRING: "MULTILINESTRING",
    GeometryKind.POLYGON: "POLYGON",
    GeometryKind.MULTIPOLYGON: "MULTIPOLYGON",
    GeometryKind.COLLECTION: "GEOMETRYCOLLECTION",
}

KEYWORD_KINDS: dict[str, GeometryKind] = {
    keyword.lower(): kind for kind, keyword in WKT_KEYWORDS.items()
}

# GEOMETRYCOLLECTION nesting allowed on decode and encode
DEFAULT_MAX_DEPTH = 32
