"""Codec error types."""


class GeocodecError(Exception):
    """Base class for codec failures."""


class WKTDecodeError(GeocodecError, ValueError):
    """WKT text is malformed or names an unsupported geometry type."""


class WKTEncodeError(GeocodecError, ValueError):
    """Geometry kind has no WKT representation."""


class RouteSchemaError(GeocodecError, ValueError):
    """Route JSON does not match the parts/points schema."""
