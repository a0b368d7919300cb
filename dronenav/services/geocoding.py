"""Offline location helpers: coarse reverse geocoding and a Nepal border check.

Reverse geocoding only recognizes the districts around the two main
airports; anything else resolves to ``"Unknown"``.
"""

from __future__ import annotations

from typing import NamedTuple

from dronenav.contracts.common import GeoPoint
from dronenav.services.geodesy import polygon_covers, ring_polygon


class AddressInfo(NamedTuple):
    address: str
    district: str


# (min_lat, max_lat, min_lng, max_lng) → district
_DISTRICT_BOXES: tuple[tuple[tuple[float, float, float, float], str], ...] = (
    ((27.6, 27.8, 85.2, 85.4), "Kathmandu"),
    ((28.1, 28.3, 83.9, 84.1), "Kaski"),
)

UNKNOWN_DISTRICT = "Unknown"

# Simplified national border, [lng, lat] pairs.
_NEPAL_OUTLINE_LNG_LAT: tuple[tuple[float, float], ...] = (
    (80.088, 28.794), (80.476, 29.729), (81.112, 30.183), (81.546, 30.423),
    (82.327, 30.334), (83.337, 29.463), (84.125, 29.288), (84.675, 28.549),
    (85.251, 28.323), (85.661, 28.203), (86.100, 27.926), (86.730, 27.989),
    (87.227, 27.882), (87.771, 27.647), (88.089, 27.446), (88.175, 26.810),
    (88.043, 26.414), (87.106, 26.536), (86.696, 26.563), (85.251, 26.726),
    (84.667, 27.041), (83.305, 27.364), (82.247, 27.364), (81.112, 27.926),
    (80.476, 28.104), (80.088, 28.794),
)

NEPAL_OUTLINE: list[GeoPoint] = [GeoPoint.from_lng_lat(p) for p in _NEPAL_OUTLINE_LNG_LAT]
_NEPAL_POLYGON = ring_polygon(NEPAL_OUTLINE)


def format_address(point: GeoPoint) -> str:
    return f"Lat: {point.latitude:.4f}°, Lng: {point.longitude:.4f}°"


def reverse_geocode(point: GeoPoint) -> AddressInfo:
    """Best-effort address and district for *point*."""
    district = UNKNOWN_DISTRICT
    for (min_lat, max_lat, min_lng, max_lng), name in _DISTRICT_BOXES:
        if min_lat < point.latitude < max_lat and min_lng < point.longitude < max_lng:
            district = name
            break
    return AddressInfo(address=format_address(point), district=district)


def is_within_nepal(point: GeoPoint) -> bool:
    return polygon_covers(_NEPAL_POLYGON, point)
