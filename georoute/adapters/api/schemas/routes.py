from __future__ import annotations

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class NearestRequestSchema(BaseModel):
    point: GeoPointSchema


class NearestResponseSchema(BaseModel):
    point: GeoPointSchema


class ConnectedRequestSchema(BaseModel):
    a: GeoPointSchema
    b: GeoPointSchema


class ConnectedResponseSchema(BaseModel):
    connected: bool


class RouteRequestSchema(BaseModel):
    origin: GeoPointSchema
    destination: GeoPointSchema
    snap: bool = False


class RouteSchema(BaseModel):
    origin: GeoPointSchema
    destination: GeoPointSchema
    path: list[GeoPointSchema] = []

    total_distance_mi: float
    total_distance_m: float


class DistanceRequestSchema(BaseModel):
    points: list[GeoPointSchema] = []


class DistanceResponseSchema(BaseModel):
    total_distance_mi: float
    total_distance_m: float


class ErrorSchema(BaseModel):
    detail: str
    reason: str | None = None
