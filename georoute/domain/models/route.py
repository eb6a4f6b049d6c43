from __future__ import annotations

from dataclasses import dataclass, field

from .geo import GeoPoint

METERS_PER_MILE = 1609.344


@dataclass(frozen=True, slots=True)
class Route:
    origin: GeoPoint
    destination: GeoPoint
    path: tuple[GeoPoint, ...] = field(default_factory=tuple)

    @property
    def total_distance_mi(self) -> float:
        # Local import: geo_utils depends on models.
        from georoute.domain.algorithms.geo_utils import polyline_distance_mi

        return polyline_distance_mi(self.path)

    @property
    def total_distance_m(self) -> float:
        return self.total_distance_mi * METERS_PER_MILE
