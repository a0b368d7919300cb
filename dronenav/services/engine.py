"""Wiring of registry, classifier, resolver and wizard from loaded catalogs.

Environment Variables:
    DRONENAV_POLYGON_MODE: ``centroid_radius`` (default) or ``ray_casting``
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dronenav.contracts.airspace import AirspaceZone
from dronenav.contracts.enums import PolygonMode
from dronenav.contracts.regulation import Regulation
from dronenav.persistence.catalog_loader import (
    REGULATIONS_FILENAME,
    ZONES_FILENAME,
    catalog_dir,
    load_regulations,
    load_zones,
)
from dronenav.services.classifier import ContainmentClassifier
from dronenav.services.flight_plan_wizard import FlightPlanWizard
from dronenav.services.regulation_resolver import RegulationResolver
from dronenav.services.zone_registry import ZoneRegistry

logger = logging.getLogger(__name__)


def configured_polygon_mode() -> PolygonMode:
    raw = os.environ.get("DRONENAV_POLYGON_MODE", PolygonMode.CENTROID_RADIUS.value)
    try:
        return PolygonMode(raw.strip().lower())
    except ValueError:
        logger.warning("Unknown DRONENAV_POLYGON_MODE %r, using centroid_radius", raw)
        return PolygonMode.CENTROID_RADIUS


@dataclass
class PlanningEngine:
    """Everything a planning session needs, built once per process."""

    registry: ZoneRegistry
    classifier: ContainmentClassifier
    resolver: RegulationResolver
    wizard: FlightPlanWizard

    @classmethod
    def from_catalogs(
        cls,
        zones: list[AirspaceZone],
        regulations: list[Regulation],
        polygon_mode: PolygonMode = PolygonMode.CENTROID_RADIUS,
    ) -> "PlanningEngine":
        registry = ZoneRegistry(zones)
        classifier = ContainmentClassifier(registry, polygon_mode=polygon_mode)
        resolver = RegulationResolver(regulations)
        return cls(
            registry=registry,
            classifier=classifier,
            resolver=resolver,
            wizard=FlightPlanWizard(classifier, resolver),
        )


def load_engine(
    directory: Path | None = None,
    polygon_mode: PolygonMode | None = None,
) -> PlanningEngine:
    """Build an engine from catalog files.

    Raises :class:`dronenav.persistence.errors.CatalogFileError` when a
    catalog file is missing or unreadable.
    """
    directory = directory or catalog_dir()
    return PlanningEngine.from_catalogs(
        load_zones(directory / ZONES_FILENAME),
        load_regulations(directory / REGULATIONS_FILENAME),
        polygon_mode=polygon_mode or configured_polygon_mode(),
    )
