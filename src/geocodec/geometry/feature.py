"""Feature — a geometry plus its attribute record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from geocodec.geometry.base import Geometry


@dataclass
class Feature:
    """A single geometry-bearing feature.

    Attributes:
        geometry: The feature's geometry tree.
        properties: Arbitrary key-value metadata.
        feature_id: Optional identifier; WKT carries none.
    """

    geometry: Geometry
    properties: dict = field(default_factory=dict)
    feature_id: Optional[str] = None
