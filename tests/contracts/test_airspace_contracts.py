"""Tests for airspace zone and geometry models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dronenav.contracts.airspace import (
    AirspaceZone,
    CircleGeometry,
    PolygonGeometry,
    ZoneSummary,
)
from dronenav.contracts.common import GeoPoint
from dronenav.contracts.enums import ZoneType


class TestGeoPoint:
    def test_bounds(self):
        with pytest.raises(ValidationError):
            GeoPoint(latitude=91, longitude=0)
        with pytest.raises(ValidationError):
            GeoPoint(latitude=0, longitude=-180.5)

    def test_from_lng_lat(self):
        point = GeoPoint.from_lng_lat([85.3592, 27.6989])
        assert point.as_tuple() == (27.6989, 85.3592)

    def test_from_lng_lat_rejects_bad_pair(self):
        with pytest.raises(ValueError):
            GeoPoint.from_lng_lat([85.3592])

    def test_hashable(self):
        assert len({GeoPoint(latitude=1, longitude=2), GeoPoint(latitude=1.0, longitude=2.0)}) == 1


class TestGeometry:
    def test_circle_legacy_shape(self):
        geom = CircleGeometry.model_validate(
            {"type": "Circle", "coordinates": [84.0008, 28.2003], "radius": 3000}
        )
        assert geom.center == GeoPoint(latitude=28.2003, longitude=84.0008)
        assert geom.radius_m == 3000

    def test_circle_wrapped_centre(self):
        geom = CircleGeometry.model_validate(
            {"type": "Circle", "coordinates": [[84.0008, 28.2003]], "radius": 3000}
        )
        assert geom.center.latitude == 28.2003

    def test_circle_radius_must_be_positive(self):
        with pytest.raises(ValidationError):
            CircleGeometry.model_validate(
                {"type": "Circle", "coordinates": [84.0, 28.0], "radius": 0}
            )

    def test_circle_missing_radius(self):
        with pytest.raises(ValidationError):
            CircleGeometry.model_validate({"type": "Circle", "coordinates": [84.0, 28.0]})

    def test_polygon_flat_ring(self):
        geom = PolygonGeometry.model_validate(
            {"type": "Polygon", "coordinates": [[85.2, 27.65], [85.3, 27.65], [85.3, 27.75], [85.2, 27.65]]}
        )
        assert len(geom.ring) == 4
        assert geom.ring[1] == GeoPoint(latitude=27.65, longitude=85.3)
        assert geom.ring[0] == geom.ring[-1]

    def test_polygon_nested_rings_keep_outer(self):
        geom = PolygonGeometry.model_validate({
            "type": "Polygon",
            "coordinates": [
                [[85.2, 27.65], [85.3, 27.65], [85.3, 27.75]],
                [[85.22, 27.67], [85.24, 27.67], [85.24, 27.69]],
            ],
        })
        assert [p.longitude for p in geom.ring] == [85.2, 85.3, 85.3]
        assert len(geom.ring) == 3

    def test_polygon_needs_a_vertex(self):
        with pytest.raises(ValidationError):
            PolygonGeometry(ring=[])


class TestAirspaceZone:
    def test_discriminated_geometry(self):
        zone = AirspaceZone.model_validate({
            "id": "a2",
            "name": "Chitwan National Park",
            "type": "advisory",
            "geometry": {"type": "Polygon", "coordinates": [[84.2, 27.5], [84.5, 27.5], [84.5, 27.7]]},
        })
        assert isinstance(zone.geometry, PolygonGeometry)
        assert zone.type == ZoneType.ADVISORY
        assert zone.description == ""

    def test_unknown_geometry_kind(self):
        with pytest.raises(ValidationError):
            AirspaceZone.model_validate({
                "id": "x",
                "name": "Line",
                "type": "open",
                "geometry": {"type": "LineString", "coordinates": [[84.2, 27.5], [84.5, 27.5]]},
            })

    def test_unknown_zone_type(self):
        with pytest.raises(ValidationError):
            AirspaceZone.model_validate({
                "id": "x",
                "name": "Danger",
                "type": "danger",
                "geometry": {"type": "Circle", "coordinates": [84.0, 28.0], "radius": 100},
            })

    def test_frozen(self, zones):
        with pytest.raises(ValidationError):
            zones[0].name = "Renamed"

    def test_to_dict_normalized_camel_case(self, zones):
        data = zones[0].to_dict()
        assert data["geometry"] == {
            "type": "Circle",
            "center": {"latitude": 27.6989, "longitude": 85.3592},
            "radiusM": 5000.0,
        }
        assert data["type"] == "restricted"

    def test_to_dict_round_trips(self, zones):
        for zone in zones:
            assert AirspaceZone.from_dict(zone.to_dict()) == zone

    def test_summary(self, zones):
        assert ZoneSummary.of(zones[0]).to_dict() == {
            "id": "r1",
            "name": "Tribhuvan International Airport Restricted Zone",
            "type": "restricted",
        }
