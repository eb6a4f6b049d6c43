from __future__ import annotations

from fastapi import APIRouter, Depends

from georoute.adapters.api.dependencies import get_routing_service
from georoute.adapters.api.schemas.routes import (
    ConnectedRequestSchema,
    ConnectedResponseSchema,
    DistanceRequestSchema,
    DistanceResponseSchema,
    ErrorSchema,
    GeoPointSchema,
    NearestRequestSchema,
    NearestResponseSchema,
    RouteRequestSchema,
    RouteSchema,
)
from georoute.app.services.routing_service import RoutingService
from georoute.domain.models import METERS_PER_MILE, GeoPoint, Route

router = APIRouter(tags=["routes"])


def _to_domain(p: GeoPointSchema) -> GeoPoint:
    return GeoPoint(lat=p.lat, lon=p.lon)


def _to_schema(p: GeoPoint) -> GeoPointSchema:
    return GeoPointSchema(lat=p.lat, lon=p.lon)


def _route_to_schema(route: Route) -> RouteSchema:
    return RouteSchema(
        origin=_to_schema(route.origin),
        destination=_to_schema(route.destination),
        path=[_to_schema(p) for p in route.path],
        total_distance_mi=route.total_distance_mi,
        total_distance_m=route.total_distance_m,
    )


@router.post(
    "/nearest",
    response_model=NearestResponseSchema,
    responses={409: {"model": ErrorSchema}},
)
def find_nearest(
    req: NearestRequestSchema,
    service: RoutingService = Depends(get_routing_service),
) -> NearestResponseSchema:
    point = service.nearest_point(_to_domain(req.point))
    return NearestResponseSchema(point=_to_schema(point))


@router.post("/connected", response_model=ConnectedResponseSchema)
def check_connected(
    req: ConnectedRequestSchema,
    service: RoutingService = Depends(get_routing_service),
) -> ConnectedResponseSchema:
    return ConnectedResponseSchema(
        connected=service.connected(_to_domain(req.a), _to_domain(req.b))
    )


@router.post(
    "/routes",
    response_model=RouteSchema,
    responses={404: {"model": ErrorSchema}, 409: {"model": ErrorSchema}},
)
def calculate_route(
    req: RouteRequestSchema,
    service: RoutingService = Depends(get_routing_service),
) -> RouteSchema:
    route = service.calculate_route(
        origin=_to_domain(req.origin),
        destination=_to_domain(req.destination),
        snap=req.snap,
    )
    return _route_to_schema(route)


@router.post("/distance", response_model=DistanceResponseSchema)
def route_distance(
    req: DistanceRequestSchema,
    service: RoutingService = Depends(get_routing_service),
) -> DistanceResponseSchema:
    miles = service.route_distance(_to_domain(p) for p in req.points)
    return DistanceResponseSchema(
        total_distance_mi=miles, total_distance_m=miles * METERS_PER_MILE
    )
