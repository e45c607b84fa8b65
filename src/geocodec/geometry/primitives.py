"""Coordinate primitives: Point and MeasuredPoint.

Both are frozen value types. Dataclass equality is exact and kind-aware
(a Point never equals a MeasuredPoint); ``equals`` compares coordinates only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, Mapping

from geocodec.geometry.base import Geometry, GeometryKind


@dataclass(frozen=True)
class Point(Geometry):
    """An (x, y) coordinate pair."""

    x: float
    y: float

    kind: ClassVar[GeometryKind] = GeometryKind.POINT

    @property
    def components(self) -> list:
        return []

    def points(self) -> Iterator[Point]:
        yield self

    def equals(self, other: Point) -> bool:
        """Exact coordinate equality, ignoring any measure."""
        return self.x == other.x and self.y == other.y

    def clone(self) -> Point:
        return self

    def to_json(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class MeasuredPoint(Point):
    """A Point carrying a measure M, typically distance along a route."""

    measure: float = 0.0

    def to_json(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "measure": self.measure}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> MeasuredPoint:
        """Build a MeasuredPoint from a ``{x, y, measure}`` mapping.

        Raises:
            KeyError: If x or y is missing.
        """
        return cls(
            x=data["x"],
            y=data["y"],
            measure=data.get("measure", 0.0),
        )
