"""Great-circle and polygon helpers for zone containment.

Distances are spherical (haversine, mean Earth radius).  Polygon
containment is delegated to shapely in the lng/lat plane, which is
accurate enough for zones a few kilometers across.
"""

from __future__ import annotations

import math

from shapely.geometry import Point, Polygon

from dronenav.contracts.common import GeoPoint

EARTH_RADIUS_M = 6_371_000.0


def haversine_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in meters."""
    la1, lo1 = math.radians(a.latitude), math.radians(a.longitude)
    la2, lo2 = math.radians(b.latitude), math.radians(b.longitude)
    dlat = la2 - la1
    dlon = lo2 - lo1
    h = math.sin(dlat / 2) ** 2 + math.cos(la1) * math.cos(la2) * math.sin(dlon / 2) ** 2
    # Rounding can push h past 1 for antipodal points
    h = min(1.0, h)
    return 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h)) * EARTH_RADIUS_M


def open_ring(ring: list[GeoPoint]) -> list[GeoPoint]:
    """Drop the closing vertex of a ring whose last point repeats the first."""
    if len(ring) > 1 and ring[0] == ring[-1]:
        return ring[:-1]
    return list(ring)


def centroid(ring: list[GeoPoint]) -> GeoPoint:
    """Arithmetic mean of the ring's vertices (not area-weighted).

    A repeated closing vertex is counted once.
    """
    vertices = open_ring(ring)
    if not vertices:
        raise ValueError("cannot take the centroid of an empty ring")
    lat = sum(p.latitude for p in vertices) / len(vertices)
    lng = sum(p.longitude for p in vertices) / len(vertices)
    return GeoPoint(latitude=lat, longitude=lng)


def distinct_vertices(ring: list[GeoPoint]) -> int:
    return len(set(ring))


def ring_polygon(ring: list[GeoPoint]) -> Polygon:
    """Shapely polygon over *ring* in ``(lng, lat)`` order.

    Raises ``ValueError`` when the ring has fewer than three distinct vertices.
    """
    if distinct_vertices(ring) < 3:
        raise ValueError("a polygon needs at least three distinct vertices")
    return Polygon([(p.longitude, p.latitude) for p in open_ring(ring)])


def polygon_covers(polygon: Polygon, point: GeoPoint) -> bool:
    """Whether *point* lies inside *polygon* or on its boundary."""
    return polygon.covers(Point(point.longitude, point.latitude))


def ring_covers(ring: list[GeoPoint], point: GeoPoint) -> bool:
    """Containment test against *ring*, boundary inclusive.

    Degenerate rings contain nothing.
    """
    if distinct_vertices(ring) < 3:
        return False
    return polygon_covers(ring_polygon(ring), point)
