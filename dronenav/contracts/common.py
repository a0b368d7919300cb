"""Base classes and shared types for DroneNav contracts.

Unit conventions (all contracts and API responses):
- **Distances / radii**: meters — suffix ``_m``
- **Altitudes**: meters above ground level (AGL)
- **Durations**: minutes
- **Coordinates**: WGS84 decimal degrees, always ``(latitude, longitude)``

Records exchanged with the surrounding web application use camelCase keys
(``applicableTo``, ``zoneDependant``...).  Models accept both camelCase and
snake_case on input and serialize camelCase.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Base model with camelCase wire serialization.

    - ``to_dict()`` produces a JSON-safe dict (enums as values, camelCase keys).
    - ``from_dict()`` hydrates from a wire/catalog dict.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CatalogModel":
        """Create model instance from a wire/catalog dict."""
        return cls.model_validate(data)


class GeoPoint(BaseModel):
    """WGS84 geographic coordinate."""

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_lng_lat(cls, pair: list[float] | tuple[float, float]) -> "GeoPoint":
        """Build from a GeoJSON-ordered ``[lng, lat]`` pair."""
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ValueError(f"expected [lng, lat], got {pair!r}")
        return cls(latitude=pair[1], longitude=pair[0])

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)
