"""Regulation, permission and advisory resolution for a flight profile.

Three independent tables drive the outcome:

- the **regulation catalog** (reference data), filtered by operator type,
  matched zone types and, for a few rules, flight parameters;
- the **permission policy** (``is_permitted``) — restricted airspace is a
  no-go, everything else is allowed with conditions;
- the **required-permission table** — fixed strings per zone type.

The permission table is not derived from the catalog.  The two must be
kept in sync by hand; ``RegulationResolver.permission_coverage_gaps``
reports zone types the table covers but no zone-dependant regulation does.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from dronenav.contracts.airspace import AirspaceZone
from dronenav.contracts.enums import ParameterGate, ZoneType
from dronenav.contracts.flight_plan import FlightDetails, FlightIntent, FlightResults, Location
from dronenav.contracts.regulation import FlightParameters, Regulation
from dronenav.services.priority import most_restrictive

logger = logging.getLogger(__name__)

ALTITUDE_LIMIT_M = 120  # AGL
REGISTRATION_WEIGHT_CLASS = "Over 2kg"

POPULATED_LOCATION_TYPES: frozenset[str] = frozenset({
    "Built-up area (city, town)",
    "Populated area (village, settlement)",
})

# Regulations that only apply when a flight parameter condition holds,
# on top of the operator/zone filter.
DEFAULT_PARAMETER_GATES: dict[str, ParameterGate] = {
    "reg2": ParameterGate.ALTITUDE_OVER_LIMIT,  # Maximum Altitude
    "reg5": ParameterGate.OVER_POPULATED_AREA,  # Populated Areas
    "reg7": ParameterGate.NIGHT_OPERATION,  # Night Operations
}

_FLIGHT_PERMITTED: dict[ZoneType, bool] = {
    ZoneType.RESTRICTED: False,
    ZoneType.CONTROLLED: True,
    ZoneType.ADVISORY: True,
    ZoneType.OPEN: True,
}

REQUIRED_PERMISSIONS: dict[ZoneType, tuple[str, ...]] = {
    ZoneType.RESTRICTED: (
        "Special authorization from CAA Nepal",
        "Military clearance (for military zones)",
    ),
    ZoneType.CONTROLLED: (
        "Permission from airport authority",
        "Flight plan submission to CAA Nepal",
    ),
}

# Advisory zones need site-specific permissions, picked by keywords in the
# zone's name/description.
ADVISORY_PERMISSIONS: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("park", "conservation", "wildlife", "protected"),
        "Department of National Parks and Wildlife Conservation permission",
    ),
    (
        ("temple", "cultural", "heritage", "religious"),
        "Cultural site authority permission",
    ),
)

ALTITUDE_ADVISORY = "Your planned altitude exceeds the maximum allowed limit of 120 meters."
NIGHT_ADVISORY = "Night operations require special authorization from CAA Nepal."
REGISTRATION_ADVISORY = "Drones over 2kg must be registered with CAA Nepal."
ZONE_ADVISORIES: dict[ZoneType, str] = {
    ZoneType.RESTRICTED: (
        "This location is in a restricted zone. "
        "Flying is not permitted without special authorization."
    ),
    ZoneType.CONTROLLED: (
        "This location is in a controlled airspace. Permission required before flight."
    ),
    ZoneType.ADVISORY: (
        "This location is in an advisory zone. Special considerations apply."
    ),
}


# ------------------------------------------------------------------
# Policy tables
# ------------------------------------------------------------------


def is_permitted(zone_type: ZoneType | str) -> bool:
    """Whether flying is permitted in the most restrictive zone type.

    Unknown types are treated as open airspace.
    """
    try:
        return _FLIGHT_PERMITTED[ZoneType(zone_type)]
    except ValueError:
        logger.warning("Unknown zone type %r, treating as open airspace", zone_type)
        return True


def required_permissions(
    zone_types: Iterable[ZoneType | str],
    zones: Iterable[AirspaceZone] | None = None,
) -> list[str]:
    """Permissions to obtain before flying.

    Restricted items come first, then controlled, then advisory items.
    Advisory items depend on *which* advisory zones matched, so they are
    only produced when *zones* is given.
    """
    present = {ZoneType(t) for t in zone_types}
    permissions: list[str] = []
    for zone_type in (ZoneType.RESTRICTED, ZoneType.CONTROLLED):
        if zone_type in present:
            permissions.extend(REQUIRED_PERMISSIONS[zone_type])

    if ZoneType.ADVISORY in present and zones is not None:
        texts = [
            f"{z.name} {z.description}".lower()
            for z in zones
            if z.type == ZoneType.ADVISORY
        ]
        for keywords, permission in ADVISORY_PERMISSIONS:
            if any(k in text for text in texts for k in keywords):
                permissions.append(permission)
    return permissions


def is_over_populated_area(location_type: str | None) -> bool:
    return location_type in POPULATED_LOCATION_TYPES


def advisory_messages(
    *,
    altitude: float | None,
    is_night_operation: bool,
    zone_type: ZoneType | str,
    drone_weight: str | None,
) -> list[str]:
    """Human-readable advisories, in a fixed order.

    Each condition fires independently: altitude above the limit, night
    operation, non-open airspace, registration weight class.
    """
    messages: list[str] = []
    if altitude is not None and altitude > ALTITUDE_LIMIT_M:
        messages.append(ALTITUDE_ADVISORY)
    if is_night_operation:
        messages.append(NIGHT_ADVISORY)
    zone_message = ZONE_ADVISORIES.get(ZoneType(zone_type))
    if zone_message:
        messages.append(zone_message)
    if drone_weight == REGISTRATION_WEIGHT_CLASS:
        messages.append(REGISTRATION_ADVISORY)
    return messages


# ------------------------------------------------------------------
# Regulation catalog
# ------------------------------------------------------------------


class RegulationResolver:
    """Filters the regulation catalog for a flight profile."""

    def __init__(
        self,
        regulations: Iterable[Regulation],
        parameter_gates: dict[str, ParameterGate] | None = None,
    ):
        self._regulations = list(regulations)
        self._gates = dict(DEFAULT_PARAMETER_GATES if parameter_gates is None else parameter_gates)

        gaps = self.permission_coverage_gaps()
        if gaps:
            logger.warning(
                "Required-permission table covers zone types with no zone-dependant regulation: %s",
                ", ".join(t.value for t in gaps),
            )

    @property
    def regulations(self) -> list[Regulation]:
        return list(self._regulations)

    def by_id(self, regulation_id: str) -> Regulation | None:
        return next((r for r in self._regulations if r.id == regulation_id), None)

    def applicable_regulations(
        self,
        operator_type: str,
        zone_types: Iterable[ZoneType | str],
        params: FlightParameters | None = None,
    ) -> list[Regulation]:
        """Regulations that apply to an operator in the given zones.

        A regulation is kept when the operator is listed in
        ``applicable_to``, its zone gate (if zone dependant) intersects
        *zone_types*, and its parameter gate (if any) holds.
        """
        params = params or FlightParameters()
        operator = str(getattr(operator_type, "value", operator_type)).strip().lower()
        present = {ZoneType(t) for t in zone_types}

        result: list[Regulation] = []
        for reg in self._regulations:
            if operator not in {tag.lower() for tag in reg.applicable_to}:
                continue
            if reg.zone_dependant and not present.intersection(reg.applicable_zones or ()):
                continue
            gate = self._gates.get(reg.id)
            if gate is not None and not _gate_holds(gate, params):
                continue
            result.append(reg)
        return result

    def build_results(
        self,
        intent: FlightIntent,
        location: Location,
        flight: FlightDetails,
        zones: list[AirspaceZone],
    ) -> FlightResults:
        """Resolve everything shown on the results step."""
        zone_types = [z.type for z in zones]
        effective = most_restrictive(zone_types)
        params = FlightParameters(
            altitude=flight.altitude,
            is_night_operation=flight.is_night_operation,
            is_over_populated_area=is_over_populated_area(location.location_type),
        )
        regulations = self.applicable_regulations(
            intent.drone_pilot_type or "", zone_types, params
        )
        return FlightResults(
            is_permitted=is_permitted(effective),
            permissions_required=required_permissions(zone_types, zones=zones),
            regulations_applicable=[r.title for r in regulations],
            advisory_messages=advisory_messages(
                altitude=flight.altitude,
                is_night_operation=flight.is_night_operation,
                zone_type=effective,
                drone_weight=intent.drone_weight,
            ),
            airspace_type=effective,
            matched_zone_ids=[z.id for z in zones],
        )

    def permission_coverage_gaps(self) -> list[ZoneType]:
        """Zone types in the permission table no zone-dependant regulation covers."""
        covered = {
            zone_type
            for reg in self._regulations
            if reg.zone_dependant
            for zone_type in (reg.applicable_zones or ())
        }
        return [t for t in REQUIRED_PERMISSIONS if t not in covered]


def _gate_holds(gate: ParameterGate, params: FlightParameters) -> bool:
    if gate is ParameterGate.ALTITUDE_OVER_LIMIT:
        return params.altitude is not None and params.altitude > ALTITUDE_LIMIT_M
    if gate is ParameterGate.NIGHT_OPERATION:
        return params.is_night_operation
    if gate is ParameterGate.OVER_POPULATED_AREA:
        return params.is_over_populated_area
    return True
