"""DroneNav data contracts — Pydantic v2 models for drone flight planning in Nepal.

Reference data (static, loaded once per process, immutable)
-----------------------------------------------------------
- ``AirspaceZone`` — restricted / controlled / advisory / open zones with
  circle or polygon geometry
- ``Regulation`` — CAA Nepal drone rules, optionally gated on zone types

Working state (owned by the caller, one per planning session)
-------------------------------------------------------------
- ``FlightPlan`` — wizard step + ``FlightIntent`` / ``Location`` /
  ``FlightDetails`` sections

Calculated (never persisted)
----------------------------
- ``FlightResults`` — permission verdict, regulations, advisories
- ``PointClassification`` / ``RouteClassification`` — containment results
"""

from dronenav.contracts.enums import (
    OperatorType,
    ParameterGate,
    PolygonMode,
    WizardStep,
    ZoneType,
)
from dronenav.contracts.common import CatalogModel, GeoPoint
from dronenav.contracts.result import ServiceError, ServiceResult
from dronenav.contracts.airspace import (
    AirspaceZone,
    CircleGeometry,
    Geometry,
    PointClassification,
    PolygonGeometry,
    RouteClassification,
    ZoneSummary,
)
from dronenav.contracts.regulation import FlightParameters, Regulation
from dronenav.contracts.flight_plan import (
    FlightDetails,
    FlightIntent,
    FlightPlan,
    FlightResults,
    Location,
)

__all__ = [
    # Enums
    "OperatorType",
    "ParameterGate",
    "PolygonMode",
    "WizardStep",
    "ZoneType",
    # Common
    "CatalogModel",
    "GeoPoint",
    # Result
    "ServiceError",
    "ServiceResult",
    # Airspace
    "AirspaceZone",
    "CircleGeometry",
    "Geometry",
    "PointClassification",
    "PolygonGeometry",
    "RouteClassification",
    "ZoneSummary",
    # Regulations
    "FlightParameters",
    "Regulation",
    # Flight plan
    "FlightDetails",
    "FlightIntent",
    "FlightPlan",
    "FlightResults",
    "Location",
]
