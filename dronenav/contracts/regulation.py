"""Drone regulations — static reference data and flight parameters used to filter them."""

from typing import Self

from pydantic import Field, model_validator

from dronenav.contracts.common import CatalogModel
from dronenav.contracts.enums import ZoneType


class Regulation(CatalogModel):
    """A drone regulation from the CAA Nepal rulebook.

    ``applicable_zones`` gates the regulation on the zone types a flight
    touches and is only meaningful when ``zone_dependant`` is true.
    """

    id: str = Field(..., min_length=1, description="e.g. 'reg4'")
    title: str = Field(..., min_length=1)
    description: str = ""
    source: str = Field(default="", description="Citation, e.g. 'CAA Nepal Drone Regulations, Section 5.1'")
    applicable_to: list[str] = Field(
        default_factory=list, description="Operator tags: recreational, commercial, ..."
    )
    zone_dependant: bool = False
    applicable_zones: list[ZoneType] | None = None

    @model_validator(mode="after")
    def validate_zone_gate(self) -> Self:
        if self.zone_dependant and not self.applicable_zones:
            raise ValueError(
                f"regulation {self.id!r} is zone dependant but lists no applicable zones"
            )
        return self


class FlightParameters(CatalogModel):
    """Flight parameters some regulations additionally depend on."""

    altitude: float | None = Field(default=None, ge=0, description="Meters AGL")
    is_night_operation: bool = False
    is_over_populated_area: bool = False
