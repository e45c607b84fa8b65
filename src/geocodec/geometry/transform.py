"""Coordinate-transform collaborator seam.

The codecs never define CRS semantics. When a transformer and both CRS
codes are configured, each top-level geometry is handed to the transformer
exactly once. Nested members of a collection are not transformed again.
"""

from __future__ import annotations

from typing import Optional, Protocol

from geocodec.geometry.base import Geometry


class CoordinateTransformer(Protocol):
    """Anything that can reproject a geometry between two CRS codes."""

    def transform(self, geometry: Geometry, source_crs: str, target_crs: str) -> Geometry:
        ...


def maybe_transform(
    geometry: Geometry,
    transformer: Optional[CoordinateTransformer],
    source_crs: Optional[str],
    target_crs: Optional[str],
) -> Geometry:
    """Apply the transformer when it and both CRS codes are present.

    Returns the geometry unchanged otherwise.
    """
    if transformer is None or not source_crs or not target_crs:
        return geometry
    return transformer.transform(geometry, source_crs, target_crs)
