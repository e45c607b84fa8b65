"""Pydantic records for the Route JSON wire schema.

Wire keys use the server's camelCase (``maxM``, ``minM``); records accept
either the wire key or the Python field name.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from geocodec.geometry.base import Number


class RoutePointRecord(BaseModel):
    """One measured vertex: ``{x, y, measure}``."""
    x: float
    y: float
    measure: float = 0.0


class RouteRecord(BaseModel):
    """A Route as sent by the server: parallel ``parts`` and ``points``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[Number] = None
    center: Optional[Number] = None
    style: Optional[str] = None
    length: Optional[Number] = None
    max_m: Optional[Number] = Field(default=None, alias="maxM")
    min_m: Optional[Number] = Field(default=None, alias="minM")
    type: Optional[str] = None
    parts: Optional[list[int]] = None
    points: Optional[list[RoutePointRecord]] = None

    @field_validator("parts")
    @classmethod
    def validate_parts(cls, parts: Optional[list[int]]):
        if parts is None:
            return parts
        for count in parts:
            if count < 1:
                raise ValueError(f"part point count must be >= 1, got {count}")
        return parts
