"""Geometry codec endpoints — WKT and Route JSON decode/encode over HTTP.

Decode failures map to 422. Reprojection runs only when the embedding
application registers a transformer on ``app.state.transformer`` and both
CRS codes are configured in settings.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response
from loguru import logger
from pydantic import BaseModel

from geocodec.formats.errors import RouteSchemaError
from geocodec.formats.exporters.geojson import export_geojson, geometry_to_geojson
from geocodec.formats.exporters.route_json import export_route_json
from geocodec.formats.exporters.wkt import export_wkt
from geocodec.formats.parsers.route_json import parse_route_json
from geocodec.formats.parsers.wkt import parse_wkt
from geocodec.formats.wkt_keywords import WKT_KEYWORDS
from geocodec.geometry import Route
from geocodec_service.config import settings

router = APIRouter(prefix="/api/geometry", tags=["geometry"])


# ---------------------------------------------------------------------------
# Request / Response models
# ---------------------------------------------------------------------------

class WKTRequest(BaseModel):
    """A WKT document."""
    wkt: str


class WKTResponse(BaseModel):
    """Normalized WKT text."""
    wkt: str


class RouteComponentSummary(BaseModel):
    """One decoded route part."""
    kind: str
    point_count: int
    closed: bool


class RouteSummary(BaseModel):
    """Decoded route structure plus its GeoJSON view."""
    parts: list[int]
    components: list[RouteComponentSummary]
    length: float | None = None
    max_m: float | None = None
    min_m: float | None = None
    geojson: dict


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _crs_options(request: Request) -> dict[str, Any]:
    return {
        "transformer": getattr(request.app.state, "transformer", None),
        "external_crs": settings.external_crs,
        "internal_crs": settings.internal_crs,
    }


def _decode_route(payload: dict) -> Route:
    try:
        route = parse_route_json(payload)
    except RouteSchemaError as e:
        logger.warning(f"Route JSON rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    if route is None:
        raise HTTPException(status_code=422, detail="Route has no parts")
    return route


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/kinds")
async def list_kinds():
    """Return the WKT geometry keywords this service reads and writes."""
    return {"wkt": list(WKT_KEYWORDS.values())}


@router.post("/wkt/parse")
async def parse_wkt_endpoint(body: WKTRequest, request: Request):
    """Decode WKT and return it as a GeoJSON FeatureCollection."""
    result = parse_wkt(
        body.wkt, max_depth=settings.wkt_max_depth, **_crs_options(request),
    )
    if result is None:
        raise HTTPException(status_code=422, detail="Malformed or unsupported WKT")
    features = result if isinstance(result, list) else [result]
    return {
        "collection": isinstance(result, list),
        "features": export_geojson(features),
    }


@router.post("/wkt/normalize", response_model=WKTResponse)
async def normalize_wkt(body: WKTRequest, request: Request):
    """Decode then re-encode WKT, yielding the canonical text form."""
    options = _crs_options(request)
    result = parse_wkt(body.wkt, max_depth=settings.wkt_max_depth, **options)
    if result is None:
        raise HTTPException(status_code=422, detail="Malformed or unsupported WKT")
    text = export_wkt(result, max_depth=settings.wkt_max_depth, **options)
    if text is None:
        raise HTTPException(status_code=422, detail="Geometry has no WKT form")
    return WKTResponse(wkt=text)


@router.post("/route/parse", response_model=RouteSummary)
async def parse_route(payload: dict):
    """Decode Route JSON and summarize its parts."""
    route = _decode_route(payload)
    return RouteSummary(
        parts=route.parts,
        components=[
            RouteComponentSummary(
                kind=component.kind.value,
                point_count=len(component.components),
                closed=component.is_closed,
            )
            for component in route.components
        ],
        length=route.length,
        max_m=route.max_m,
        min_m=route.min_m,
        geojson=geometry_to_geojson(route),
    )


@router.post("/route/normalize")
async def normalize_route(payload: dict):
    """Decode then re-encode Route JSON, dropping unset fields and excess points."""
    route = _decode_route(payload)
    return Response(content=export_route_json(route), media_type="application/json")
