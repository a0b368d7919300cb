"""Flight plan — the working state of the four-step planning wizard.

The plan is owned by the caller (one per UI session) and mutated in place
by :class:`dronenav.services.flight_plan_wizard.FlightPlanWizard`.

**Input sections** (filled from the step forms):
- ``intent`` — step 1
- ``location`` — step 2 (``airspace_type`` is derived, never user input)
- ``flight`` — step 3

**Calculated** (step 3 → 4 transition):
- ``results`` — regulations, permissions and advisories for the plan
"""

import datetime as dt
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from dronenav.contracts.common import CatalogModel, GeoPoint
from dronenav.contracts.enums import WizardStep, ZoneType


class FlightIntent(CatalogModel):
    """Step 1 — why and with what the pilot intends to fly.

    All fields are optional so partially filled forms are representable.
    """

    purpose: str | None = Field(default=None, description="e.g. 'Photography'")
    drone_pilot_type: str | None = Field(
        default=None, description="Operator tag: recreational, commercial, government"
    )
    drone_category: str | None = Field(default=None, description="Micro, Small, Medium, Large")
    drone_weight: str | None = Field(
        default=None, description="'Under 250g', '250g to 2kg' or 'Over 2kg'"
    )


class Location(CatalogModel):
    """Step 2 — where the flight takes place."""

    coordinates: GeoPoint | None = None
    address: str | None = None
    district: str | None = None
    location_type: str | None = Field(
        default=None, description="e.g. 'Built-up area (city, town)'"
    )
    airspace_type: ZoneType | None = Field(
        default=None, description="Derived from coordinates by the classifier"
    )

    @field_validator("coordinates", mode="before")
    @classmethod
    def coerce_lat_lng_pair(cls, v: Any) -> Any:
        # UI layers send (lat, lng) pairs
        if isinstance(v, (list, tuple)) and len(v) == 2:
            return GeoPoint(latitude=v[0], longitude=v[1])
        return v


class FlightDetails(CatalogModel):
    """Step 3 — when, how long and how high."""

    date: dt.date | None = None
    time: dt.time | None = None
    duration: int | None = Field(default=None, ge=0, description="Minutes")
    altitude: float | None = Field(default=None, ge=0, description="Meters AGL")
    maintains_vlos: bool = True
    is_night_operation: bool = False


class FlightResults(CatalogModel):
    """Step 4 — outcome of the regulation check."""

    is_permitted: bool
    permissions_required: list[str] = Field(default_factory=list)
    regulations_applicable: list[str] = Field(
        default_factory=list, description="Regulation titles"
    )
    advisory_messages: list[str] = Field(default_factory=list)
    airspace_type: ZoneType = ZoneType.OPEN
    matched_zone_ids: list[str] = Field(default_factory=list)


class FlightPlan(CatalogModel):
    """Caller-owned wizard state.

    Created empty at step 1; ``results`` stays ``None`` until the
    intent, location and flight sections are all present.
    """

    step: int = Field(default=WizardStep.INTENT.value, ge=1, le=4)
    intent: FlightIntent | None = None
    location: Location | None = None
    flight: FlightDetails | None = None
    results: FlightResults | None = None

    model_config = ConfigDict(validate_assignment=True)
