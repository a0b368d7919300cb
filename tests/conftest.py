"""Shared fixtures: the bundled Nepal catalogs and the services built on them."""

from __future__ import annotations

import pytest

from dronenav.contracts.airspace import AirspaceZone
from dronenav.contracts.regulation import Regulation
from dronenav.persistence.catalog_loader import load_regulations, load_zones
from dronenav.services.classifier import ContainmentClassifier
from dronenav.services.flight_plan_wizard import FlightPlanWizard
from dronenav.services.regulation_resolver import RegulationResolver
from dronenav.services.zone_registry import ZoneRegistry


@pytest.fixture(scope="session")
def zones() -> list[AirspaceZone]:
    return load_zones()


@pytest.fixture(scope="session")
def regulations() -> list[Regulation]:
    return load_regulations()


@pytest.fixture
def registry(zones) -> ZoneRegistry:
    return ZoneRegistry(zones)


@pytest.fixture
def classifier(registry) -> ContainmentClassifier:
    return ContainmentClassifier(registry)


@pytest.fixture
def resolver(regulations) -> RegulationResolver:
    return RegulationResolver(regulations)


@pytest.fixture
def wizard(classifier, resolver) -> FlightPlanWizard:
    return FlightPlanWizard(classifier, resolver)
