"""Enumerations shared across all DroneNav contracts."""

from enum import Enum


class ZoneType(str, Enum):
    """Airspace zone classification, ordered by flight-restriction strength."""
    RESTRICTED = "restricted"
    CONTROLLED = "controlled"
    ADVISORY = "advisory"
    OPEN = "open"

    @property
    def severity(self) -> int:
        """Higher is stricter: restricted=3 ... open=0."""
        return _SEVERITY[self]


_SEVERITY: dict[ZoneType, int] = {
    ZoneType.RESTRICTED: 3,
    ZoneType.CONTROLLED: 2,
    ZoneType.ADVISORY: 1,
    ZoneType.OPEN: 0,
}


class PolygonMode(str, Enum):
    """How polygon zones are tested for containment."""
    CENTROID_RADIUS = "centroid_radius"  # Vertex mean + fixed per-type radius
    RAY_CASTING = "ray_casting"


class OperatorType(str, Enum):
    """Operator tags referenced by ``Regulation.applicable_to``."""
    RECREATIONAL = "recreational"
    COMMERCIAL = "commercial"
    GOVERNMENT = "government"


class WizardStep(int, Enum):
    """Positions of the four-step flight planning wizard."""
    INTENT = 1
    LOCATION = 2
    FLIGHT = 3
    RESULTS = 4


class ParameterGate(str, Enum):
    """Flight-parameter condition a regulation may additionally depend on."""
    ALTITUDE_OVER_LIMIT = "altitude_over_limit"
    NIGHT_OPERATION = "night_operation"
    OVER_POPULATED_AREA = "over_populated_area"
