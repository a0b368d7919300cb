"""In-memory catalog of airspace zones."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from dronenav.contracts.airspace import AirspaceZone
from dronenav.contracts.enums import ZoneType

logger = logging.getLogger(__name__)


class ZoneRegistry:
    """Holds the fixed set of airspace zones for a process.

    Zones keep their load order.  Ids are unique: when a catalog repeats
    an id, the first record wins and later ones are dropped.
    """

    def __init__(self, zones: Iterable[AirspaceZone] = ()):
        self._zones: list[AirspaceZone] = []
        self._by_id: dict[str, AirspaceZone] = {}
        for zone in zones:
            if zone.id in self._by_id:
                logger.warning("Duplicate airspace zone id %r ignored (%s)", zone.id, zone.name)
                continue
            self._zones.append(zone)
            self._by_id[zone.id] = zone

    def __len__(self) -> int:
        return len(self._zones)

    def list_all(self) -> list[AirspaceZone]:
        return list(self._zones)

    def by_type(self, zone_type: ZoneType | str) -> list[AirspaceZone]:
        """All zones of a given type; unknown type strings match nothing."""
        try:
            wanted = ZoneType(zone_type)
        except ValueError:
            return []
        return [z for z in self._zones if z.type == wanted]

    def by_id(self, zone_id: str) -> AirspaceZone | None:
        return self._by_id.get(zone_id)
