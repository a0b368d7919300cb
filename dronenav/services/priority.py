"""Most-restrictive-zone policy.

A point inside several overlapping zones is classified by the single most
severe type present (restricted > controlled > advisory > open), never by
an aggregate.  Open airspace is the default when nothing matches.
"""

from __future__ import annotations

from collections.abc import Iterable

from dronenav.contracts.airspace import AirspaceZone
from dronenav.contracts.enums import ZoneType


def most_restrictive(zone_types: Iterable[ZoneType]) -> ZoneType:
    """Most severe of *zone_types*, ``open`` when empty."""
    return max(zone_types, key=lambda t: t.severity, default=ZoneType.OPEN)


def resolve(zones: Iterable[AirspaceZone]) -> ZoneType:
    """Reduce matched zones to one effective classification."""
    return most_restrictive(zone.type for zone in zones)
