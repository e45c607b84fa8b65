"""Geometry kind tag and the base behaviour shared by every geometry."""

from __future__ import annotations

import copy
from enum import Enum
from typing import Iterator, Union


Number = Union[int, float]


class GeometryKind(str, Enum):
    """Closed set of geometry kinds carried by the model."""
    POINT = "point"
    MULTIPOINT = "multipoint"
    LINESTRING = "linestring"
    LINEARRING = "linearring"
    MULTILINESTRING = "multilinestring"
    POLYGON = "polygon"
    MULTIPOLYGON = "multipolygon"
    COLLECTION = "collection"
    ROUTE = "route"


class Geometry:
    """Base for all geometries.

    Subclasses set ``kind`` and expose ``components``, the ordered child
    geometries a renderer walks. Points have no components.
    """

    kind: GeometryKind
    components: list

    def points(self) -> Iterator[Geometry]:
        """Yield every vertex in document order."""
        for component in self.components:
            yield from component.points()

    def point_count(self) -> int:
        return sum(1 for _ in self.points())

    def clone(self) -> Geometry:
        """Deep copy; the clone shares no mutable state with the original."""
        return copy.deepcopy(self)
