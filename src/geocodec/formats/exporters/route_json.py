"""Export a Route to Route JSON text.

Only fields that are set are written; unset metadata is omitted rather
than written as null. Output is compact and deterministic.
"""

from __future__ import annotations

import json
from typing import Any

from geocodec.geometry import Route


def route_to_dict(route: Route) -> dict[str, Any]:
    """Build the Route JSON payload as a dict, in wire key order."""
    payload: dict[str, Any] = {}
    metadata = (
        ("id", route.route_id),
        ("center", route.center),
        ("style", route.style),
        ("length", route.length),
        ("maxM", route.max_m),
        ("minM", route.min_m),
        ("type", route.route_type),
    )
    for key, value in metadata:
        if value is not None:
            payload[key] = value

    if route.parts is not None:
        payload["parts"] = list(route.parts)

    points = [
        point.to_json()
        for component in route.components
        for point in component.points()
    ]
    if points:
        payload["points"] = points
    return payload


def export_route_json(route: Route) -> str:
    """Export a Route to compact Route JSON text."""
    return json.dumps(route_to_dict(route), separators=(",", ":"))
