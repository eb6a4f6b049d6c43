from __future__ import annotations

import math
from typing import Iterable

from georoute.domain.models import METERS_PER_MILE, GeoPoint

EARTH_RADIUS_MI = 3958.8
# Derived so meter and mile results always agree.
EARTH_RADIUS_M = EARTH_RADIUS_MI * METERS_PER_MILE


def _central_angle(a: GeoPoint, b: GeoPoint) -> float:
    lat1 = math.radians(a.lat)
    lon1 = math.radians(a.lon)
    lat2 = math.radians(b.lat)
    lon2 = math.radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    # Rounding can push s a hair above 1 for antipodal points.
    return 2.0 * math.asin(math.sqrt(min(1.0, s)))


def haversine_distance_mi(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in miles.

    This is the single metric used for edge weights, nearest-point lookup
    and route distance.
    """

    return EARTH_RADIUS_MI * _central_angle(a, b)


def haversine_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in meters."""

    return EARTH_RADIUS_M * _central_angle(a, b)


def polyline_distance_mi(points: Iterable[GeoPoint]) -> float:
    """Sum of distances between consecutive points, in miles.

    The points need not be graph vertices or edges. Fewer than two points
    yields 0.0.
    """

    pts = tuple(points)
    if len(pts) < 2:
        return 0.0
    total = 0.0
    for a, b in zip(pts, pts[1:]):
        total += haversine_distance_mi(a, b)
    return float(total)
