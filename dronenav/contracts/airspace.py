"""Airspace zone models — static reference data and classification results.

Zone geometry is a tagged union discriminated on ``type``:

- ``CircleGeometry`` — centre point + radius in meters
- ``PolygonGeometry`` — outer ring of points (closure not enforced)

The surrounding web application serves zones in a GeoJSON-ish shape
(``coordinates`` as ``[lng, lat]`` pairs, ``radius`` in meters).  Both
geometry models accept that shape on input and normalize it.
"""

from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, model_validator

from dronenav.contracts.common import CatalogModel, GeoPoint
from dronenav.contracts.enums import ZoneType


def _is_pair_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and bool(value) and isinstance(value[0], (list, tuple))


class CircleGeometry(CatalogModel):
    """Circular zone: everything within ``radius_m`` of ``center``."""

    type: Literal["Circle"] = "Circle"
    center: GeoPoint
    radius_m: float = Field(..., gt=0, description="Radius in meters")

    @model_validator(mode="before")
    @classmethod
    def from_legacy_shape(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "coordinates" not in data:
            return data
        coords = data["coordinates"]
        # Some records wrap the centre in an extra list: [[lng, lat]]
        if _is_pair_list(coords):
            coords = coords[0]
        return {
            "type": data.get("type", "Circle"),
            "center": GeoPoint.from_lng_lat(coords),
            "radius_m": data.get("radius", data.get("radius_m", data.get("radiusM"))),
        }


class PolygonGeometry(CatalogModel):
    """Polygonal zone: the first (outer) ring only."""

    type: Literal["Polygon"] = "Polygon"
    ring: list[GeoPoint] = Field(..., min_length=1)

    @model_validator(mode="before")
    @classmethod
    def from_legacy_shape(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "coordinates" not in data:
            return data
        coords = data["coordinates"]
        # GeoJSON proper nests rings: [[[lng, lat], ...], ...]; keep the outer one
        if _is_pair_list(coords) and _is_pair_list(coords[0]):
            coords = coords[0]
        return {
            "type": data.get("type", "Polygon"),
            "ring": [GeoPoint.from_lng_lat(pair) for pair in coords],
        }


Geometry = Annotated[CircleGeometry | PolygonGeometry, Field(discriminator="type")]


class AirspaceZone(CatalogModel):
    """An airspace zone — static reference data, immutable during a session."""

    id: str = Field(..., min_length=1, description="Stable unique identifier, e.g. 'r1'")
    name: str
    description: str = ""
    type: ZoneType
    geometry: Geometry

    model_config = ConfigDict(frozen=True)


class ZoneSummary(CatalogModel):
    """Compact zone reference for classification responses."""

    id: str
    name: str
    type: ZoneType

    @classmethod
    def of(cls, zone: AirspaceZone) -> "ZoneSummary":
        return cls(id=zone.id, name=zone.name, type=zone.type)


class PointClassification(CatalogModel):
    """Airspace classification of a single point."""

    point: GeoPoint
    airspace_type: ZoneType
    zones: list[ZoneSummary] = Field(default_factory=list)


class RouteClassification(CatalogModel):
    """Airspace classification of a sequence of waypoints.

    ``zones`` is the union of all matched zones (deduplicated by id, in
    first-seen order); ``airspace_type`` is the most restrictive type
    across the whole route.
    """

    waypoints: list[PointClassification] = Field(default_factory=list)
    zones: list[ZoneSummary] = Field(default_factory=list)
    airspace_type: ZoneType = ZoneType.OPEN
