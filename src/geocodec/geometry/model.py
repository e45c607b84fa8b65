"""Composite geometries — lines, rings, polygons, multi-kinds, collections.

Every composite holds its children in ``components`` in document order.
Ownership is tree-shaped: a parent owns its component list outright.
Route is a Collection subtype whose components are the lines and rings
of a measured linear feature.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Optional

from geocodec.geometry.base import Geometry, GeometryKind, Number
from geocodec.geometry.primitives import MeasuredPoint, Point


@dataclass
class LineString(Geometry):
    """Ordered sequence of points. Open by definition."""

    components: list[Point] = field(default_factory=list)

    kind: ClassVar[GeometryKind] = GeometryKind.LINESTRING

    @classmethod
    def from_coords(cls, coords: Iterable[tuple[float, float]]):
        """Build from (x, y) tuples."""
        return cls([Point(x, y) for x, y in coords])

    @property
    def is_closed(self) -> bool:
        """True when the first and last vertex share coordinates."""
        if len(self.components) < 2:
            return False
        return self.components[0].equals(self.components[-1])


@dataclass
class LinearRing(LineString):
    """A LineString whose first and last vertex are equal.

    Closure is not validated here; codecs build rings only where closure is
    known. Check ``is_closed`` when the source is untrusted.
    """

    kind: ClassVar[GeometryKind] = GeometryKind.LINEARRING


@dataclass
class Polygon(Geometry):
    """Outer ring followed by zero or more holes."""

    components: list[LinearRing] = field(default_factory=list)

    kind: ClassVar[GeometryKind] = GeometryKind.POLYGON


@dataclass
class MultiPoint(Geometry):
    components: list[Point] = field(default_factory=list)

    kind: ClassVar[GeometryKind] = GeometryKind.MULTIPOINT


@dataclass
class MultiLineString(Geometry):
    components: list[LineString] = field(default_factory=list)

    kind: ClassVar[GeometryKind] = GeometryKind.MULTILINESTRING


@dataclass
class MultiPolygon(Geometry):
    components: list[Polygon] = field(default_factory=list)

    kind: ClassVar[GeometryKind] = GeometryKind.MULTIPOLYGON


@dataclass
class Collection(Geometry):
    """Heterogeneous ordered sequence of geometries."""

    components: list[Geometry] = field(default_factory=list)

    kind: ClassVar[GeometryKind] = GeometryKind.COLLECTION


@dataclass
class Route(Collection):
    """A measured, multi-part linear feature.

    Each component is one part: a LinearRing when its endpoints coincide,
    otherwise a LineString, both made of MeasuredPoints.

    Attributes:
        route_id: Database id of the route.
        center: Center value reported by the server.
        style: Opaque style string.
        length: Route length, in the dataset's units.
        max_m: Largest measure across all vertices (carried, not computed).
        min_m: Smallest measure across all vertices (carried, not computed).
        route_type: Server geometry type, e.g. "LINEM".
        parts: Point count of each component, in component order.
    """

    route_id: Optional[Number] = None
    center: Optional[Number] = None
    style: Optional[str] = None
    length: Optional[Number] = None
    max_m: Optional[Number] = None
    min_m: Optional[Number] = None
    route_type: Optional[str] = None
    parts: Optional[list[int]] = None

    kind: ClassVar[GeometryKind] = GeometryKind.ROUTE

    @classmethod
    def from_parts(cls, lines: list[LineString], **metadata) -> Route:
        """Build a route whose ``parts`` are derived from its components."""
        parts = [len(line.components) for line in lines]
        return cls(components=list(lines), parts=parts, **metadata)

    def measures(self) -> list[float]:
        return [p.measure for p in self.points() if isinstance(p, MeasuredPoint)]
