"""Zone containment classification.

Circle zones match when the haversine distance to the centre is within
the radius (boundary inclusive).

Polygon zones are tested according to :class:`PolygonMode`:

- ``CENTROID_RADIUS`` (default): the polygon is approximated by a circle
  centred on the mean of its vertices, with a fixed radius per zone type
  that ignores the polygon's actual extent.
- ``RAY_CASTING``: true point-in-polygon test against the ring (shapely,
  boundary inclusive).  Rings with fewer than three distinct vertices fall
  back to the centroid approximation.

A zone whose geometry cannot be evaluated is skipped with a warning so one
bad record never breaks classification for the others.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from dronenav.contracts.airspace import (
    AirspaceZone,
    CircleGeometry,
    PointClassification,
    PolygonGeometry,
    RouteClassification,
    ZoneSummary,
)
from dronenav.contracts.common import GeoPoint
from dronenav.contracts.enums import PolygonMode, ZoneType
from dronenav.services.geodesy import centroid, distinct_vertices, haversine_m, ring_covers
from dronenav.services.priority import most_restrictive, resolve
from dronenav.services.zone_registry import ZoneRegistry

logger = logging.getLogger(__name__)

# Approximation radius for polygon zones, in meters.
POLYGON_RADIUS_M: dict[ZoneType, float] = {
    ZoneType.RESTRICTED: 3000.0,
    ZoneType.CONTROLLED: 5000.0,
    ZoneType.ADVISORY: 4000.0,
    ZoneType.OPEN: 6000.0,
}


class MalformedGeometryError(ValueError):
    """Zone geometry cannot be evaluated."""


class ContainmentClassifier:
    """Decides which registry zones contain a coordinate."""

    def __init__(
        self,
        registry: ZoneRegistry,
        polygon_mode: PolygonMode = PolygonMode.CENTROID_RADIUS,
    ):
        self._registry = registry
        self._polygon_mode = PolygonMode(polygon_mode)

    @property
    def polygon_mode(self) -> PolygonMode:
        return self._polygon_mode

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def zones_containing(self, point: GeoPoint) -> list[AirspaceZone]:
        """Zones whose geometry contains *point*, in registry order.

        An empty list means open airspace.
        """
        matched: list[AirspaceZone] = []
        for zone in self._registry.list_all():
            try:
                if self._contains(zone, point):
                    matched.append(zone)
            except MalformedGeometryError as exc:
                logger.warning("Skipping zone %s (%s): %s", zone.id, zone.name, exc)
        return matched

    def classify(self, point: GeoPoint) -> ZoneType:
        """Effective airspace type at *point*."""
        return resolve(self.zones_containing(point))

    def classify_point(self, point: GeoPoint) -> PointClassification:
        zones = self.zones_containing(point)
        return PointClassification(
            point=point,
            airspace_type=resolve(zones),
            zones=[ZoneSummary.of(z) for z in zones],
        )

    def classify_route(self, waypoints: Iterable[GeoPoint]) -> RouteClassification:
        """Classify every waypoint and the route as a whole.

        Only the waypoints themselves are tested, not the legs between them.
        """
        per_point: list[PointClassification] = []
        seen: dict[str, ZoneSummary] = {}
        for wp in waypoints:
            pc = self.classify_point(wp)
            per_point.append(pc)
            for summary in pc.zones:
                seen.setdefault(summary.id, summary)

        return RouteClassification(
            waypoints=per_point,
            zones=list(seen.values()),
            airspace_type=most_restrictive(pc.airspace_type for pc in per_point),
        )

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _contains(self, zone: AirspaceZone, point: GeoPoint) -> bool:
        geometry = zone.geometry
        if isinstance(geometry, CircleGeometry):
            return self._circle_contains(geometry, point)
        if isinstance(geometry, PolygonGeometry):
            return self._polygon_contains(zone.type, geometry, point)
        raise MalformedGeometryError(f"unsupported geometry {type(geometry).__name__}")

    @staticmethod
    def _circle_contains(geometry: CircleGeometry, point: GeoPoint) -> bool:
        if geometry.center is None:
            raise MalformedGeometryError("circle has no centre")
        _check_vertex(geometry.center)
        radius = geometry.radius_m
        if radius is None or not math.isfinite(radius) or radius <= 0:
            raise MalformedGeometryError(f"invalid circle radius {radius!r}")
        return haversine_m(point, geometry.center) <= radius

    def _polygon_contains(
        self, zone_type: ZoneType, geometry: PolygonGeometry, point: GeoPoint
    ) -> bool:
        ring = geometry.ring
        if not ring:
            raise MalformedGeometryError("polygon ring is empty")
        if any(p is None for p in ring):
            raise MalformedGeometryError("polygon ring has missing vertices")
        for vertex in ring:
            _check_vertex(vertex)

        if self._polygon_mode is PolygonMode.RAY_CASTING and distinct_vertices(ring) >= 3:
            return ring_covers(ring, point)

        return haversine_m(point, centroid(ring)) <= POLYGON_RADIUS_M[zone_type]


def _check_vertex(p: GeoPoint) -> None:
    # Records built without validation may carry out-of-range coordinates
    if not (-90.0 <= p.latitude <= 90.0 and -180.0 <= p.longitude <= 180.0):
        raise MalformedGeometryError(f"coordinate out of range ({p.latitude}, {p.longitude})")
