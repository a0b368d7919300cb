"""Tests for regulation and flight parameter models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dronenav.contracts.enums import ZoneType
from dronenav.contracts.regulation import FlightParameters, Regulation


class TestRegulation:
    def test_from_camel_case(self):
        reg = Regulation.from_dict({
            "id": "reg8",
            "title": "Cultural and Religious Sites",
            "applicableTo": ["recreational", "commercial"],
            "zoneDependant": True,
            "applicableZones": ["advisory"],
        })
        assert reg.applicable_to == ["recreational", "commercial"]
        assert reg.applicable_zones == [ZoneType.ADVISORY]
        assert reg.source == ""

    def test_snake_case_accepted(self):
        reg = Regulation(id="r", title="T", applicable_to=["commercial"])
        assert reg.zone_dependant is False
        assert reg.applicable_zones is None

    def test_zone_dependant_needs_zones(self):
        with pytest.raises(ValidationError, match="lists no applicable zones"):
            Regulation(id="reg4", title="Airport Proximity", zone_dependant=True, applicable_zones=[])

    def test_to_dict_omits_unset_zones(self):
        data = Regulation(id="reg1", title="Drone Registration", applicable_to=["recreational"]).to_dict()
        assert data == {
            "id": "reg1",
            "title": "Drone Registration",
            "description": "",
            "source": "",
            "applicableTo": ["recreational"],
            "zoneDependant": False,
        }

    def test_unknown_zone_type_rejected(self):
        with pytest.raises(ValidationError):
            Regulation(id="x", title="X", zone_dependant=True, applicable_zones=["danger"])


class TestFlightParameters:
    def test_defaults(self):
        params = FlightParameters()
        assert params.altitude is None
        assert params.is_night_operation is False
        assert params.is_over_populated_area is False

    def test_negative_altitude_rejected(self):
        with pytest.raises(ValidationError):
            FlightParameters(altitude=-5)
