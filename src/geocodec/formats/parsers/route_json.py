"""Parse Route JSON into a Route.

The wire form carries every vertex in one flat ``points`` array and the
per-part vertex counts in ``parts``. Parts are rebuilt in order: a part
whose first and last vertex coincide becomes a LinearRing, otherwise a
LineString.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from loguru import logger
from pydantic import ValidationError

from geocodec.formats.errors import RouteSchemaError
from geocodec.formats.records import RouteRecord
from geocodec.geometry import LinearRing, LineString, MeasuredPoint, Route


def parse_route_json(data: Optional[Mapping[str, Any]]) -> Optional[Route]:
    """Build a Route from a decoded Route JSON object.

    Args:
        data: Mapping with ``parts``, ``points`` and optional metadata.

    Returns:
        The Route, or None when ``data`` is empty or has no parts.

    Raises:
        RouteSchemaError: If the mapping does not match the schema, or
            ``points`` is shorter than ``sum(parts)``.
    """
    if not data:
        return None

    try:
        record = RouteRecord.model_validate(data)
    except ValidationError as e:
        raise RouteSchemaError(f"invalid route JSON: {e}") from e

    if not record.parts:
        return None

    points = record.points or []
    needed = sum(record.parts)
    if len(points) < needed:
        raise RouteSchemaError(
            f"parts require {needed} points but only {len(points)} given"
        )
    if len(points) > needed:
        logger.warning(f"Route JSON has {len(points) - needed} points beyond its parts; ignored")

    lines: list[LineString] = []
    cursor = 0
    for count in record.parts:
        part = [
            MeasuredPoint(p.x, p.y, p.measure)
            for p in points[cursor:cursor + count]
        ]
        cursor += count
        if part[0].equals(part[-1]):
            lines.append(LinearRing(part))
        else:
            lines.append(LineString(part))

    return Route(
        components=lines,
        route_id=record.id,
        center=record.center,
        style=record.style,
        length=record.length,
        max_m=record.max_m,
        min_m=record.min_m,
        route_type=record.type,
        parts=list(record.parts),
    )


def parse_route_json_text(route_string: str) -> Optional[Route]:
    """Parse Route JSON text. See parse_route_json."""
    try:
        data = json.loads(route_string)
    except (json.JSONDecodeError, TypeError) as e:
        raise RouteSchemaError(f"malformed route JSON: {e}") from e
    if data is not None and not isinstance(data, dict):
        raise RouteSchemaError(f"route JSON must be an object, got {type(data).__name__}")
    return parse_route_json(data)
