"""Tests for the most-restrictive-zone policy."""

from __future__ import annotations

import itertools

import pytest

from dronenav.contracts.airspace import AirspaceZone, CircleGeometry
from dronenav.contracts.enums import ZoneType
from dronenav.services.priority import most_restrictive, resolve
from dronenav.services.regulation_resolver import is_permitted
from tests.geo_points import TRIBHUVAN


def _zone(zone_type: ZoneType, idx: int = 0) -> AirspaceZone:
    return AirspaceZone(
        id=f"{zone_type.value}-{idx}",
        name=zone_type.value,
        type=zone_type,
        geometry=CircleGeometry(center=TRIBHUVAN, radius_m=1000),
    )


ALL_COMBINATIONS = [
    list(combo)
    for size in range(1, 5)
    for combo in itertools.combinations(list(ZoneType), size)
]


class TestResolve:
    def test_empty_is_open(self):
        assert resolve([]) == ZoneType.OPEN

    def test_controlled_beats_advisory(self):
        assert resolve([_zone(ZoneType.ADVISORY), _zone(ZoneType.CONTROLLED)]) == ZoneType.CONTROLLED

    def test_single_open_zone(self):
        assert resolve([_zone(ZoneType.OPEN)]) == ZoneType.OPEN

    @pytest.mark.parametrize("types", ALL_COMBINATIONS)
    def test_restricted_always_wins(self, types):
        zones = [_zone(t, i) for i, t in enumerate(types)]
        if ZoneType.RESTRICTED in types:
            assert resolve(zones) == ZoneType.RESTRICTED
        else:
            assert resolve(zones) != ZoneType.RESTRICTED

    @pytest.mark.parametrize("types", ALL_COMBINATIONS)
    def test_denied_iff_restricted_present(self, types):
        zones = [_zone(t, i) for i, t in enumerate(types)]
        assert is_permitted(resolve(zones)) is (ZoneType.RESTRICTED not in types)

    def test_duplicates_do_not_change_outcome(self):
        zones = [_zone(ZoneType.ADVISORY, i) for i in range(5)]
        assert resolve(zones) == ZoneType.ADVISORY


class TestMostRestrictive:
    def test_bare_types(self):
        assert most_restrictive([ZoneType.OPEN, ZoneType.ADVISORY]) == ZoneType.ADVISORY

    def test_accepts_generator(self):
        assert most_restrictive(t for t in [ZoneType.CONTROLLED]) == ZoneType.CONTROLLED

    def test_severity_order(self):
        ordered = sorted(ZoneType, key=lambda t: t.severity, reverse=True)
        assert ordered == [
            ZoneType.RESTRICTED,
            ZoneType.CONTROLLED,
            ZoneType.ADVISORY,
            ZoneType.OPEN,
        ]
