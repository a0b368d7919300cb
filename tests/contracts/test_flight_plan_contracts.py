"""Tests for the flight plan working-state models."""

from __future__ import annotations

import datetime as dt

import pytest
from pydantic import ValidationError

from dronenav.contracts.common import GeoPoint
from dronenav.contracts.enums import ZoneType
from dronenav.contracts.flight_plan import (
    FlightDetails,
    FlightPlan,
    FlightResults,
    Location,
)


class TestLocation:
    def test_lat_lng_tuple(self):
        location = Location(coordinates=(27.7, 85.3))
        assert location.coordinates == GeoPoint(latitude=27.7, longitude=85.3)

    def test_geo_point_dict(self):
        location = Location.from_dict({"coordinates": {"latitude": 27.7, "longitude": 85.3}})
        assert location.coordinates.longitude == 85.3

    def test_out_of_range_pair(self):
        with pytest.raises(ValidationError):
            Location(coordinates=(95.0, 85.3))

    def test_camel_case_keys(self):
        location = Location.from_dict({"locationType": "Rural/unpopulated area"})
        assert location.location_type == "Rural/unpopulated area"
        assert location.to_dict() == {"locationType": "Rural/unpopulated area"}


class TestFlightDetails:
    def test_parses_strings(self):
        flight = FlightDetails.from_dict({"date": "2026-11-02", "time": "09:30", "altitude": 80})
        assert flight.date == dt.date(2026, 11, 2)
        assert flight.time == dt.time(9, 30)
        assert flight.maintains_vlos is True
        assert flight.is_night_operation is False

    def test_to_dict(self):
        data = FlightDetails(date=dt.date(2026, 11, 2), altitude=0, is_night_operation=True).to_dict()
        assert data == {
            "date": "2026-11-02",
            "altitude": 0.0,
            "maintainsVlos": True,
            "isNightOperation": True,
        }


class TestFlightPlan:
    def test_empty_plan(self):
        plan = FlightPlan()
        assert plan.step == 1
        assert plan.to_dict() == {"step": 1}

    @pytest.mark.parametrize("step", [0, 5])
    def test_step_bounds(self, step):
        with pytest.raises(ValidationError):
            FlightPlan(step=step)

    def test_assignment_validated(self):
        plan = FlightPlan()
        with pytest.raises(ValidationError):
            plan.step = 9

    def test_results_serialized_camel_case(self):
        plan = FlightPlan(
            step=4,
            results=FlightResults(
                is_permitted=False,
                permissions_required=["Special authorization from CAA Nepal"],
                airspace_type=ZoneType.RESTRICTED,
            ),
        )
        results = plan.to_dict()["results"]
        assert results["isPermitted"] is False
        assert results["airspaceType"] == "restricted"
        assert results["permissionsRequired"] == ["Special authorization from CAA Nepal"]
        assert results["matchedZoneIds"] == []
