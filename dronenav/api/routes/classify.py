"""Point and route airspace classification endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import Field

from dronenav.api.deps import get_classifier
from dronenav.contracts.common import CatalogModel, GeoPoint
from dronenav.services.classifier import ContainmentClassifier
from dronenav.services.geocoding import is_within_nepal, reverse_geocode

router = APIRouter(prefix="/classify", tags=["classify"])


class RouteRequest(CatalogModel):
    waypoints: list[GeoPoint] = Field(..., min_length=1)


@router.post("")
async def classify_point(
    point: GeoPoint,
    classifier: ContainmentClassifier = Depends(get_classifier),
) -> dict:
    """Zones containing a point, its airspace type and a coarse address."""
    data = classifier.classify_point(point).to_dict()
    address = reverse_geocode(point)
    data["address"] = address.address
    data["district"] = address.district
    data["withinNepal"] = is_within_nepal(point)
    return data


@router.post("/route")
async def classify_route(
    body: RouteRequest,
    classifier: ContainmentClassifier = Depends(get_classifier),
) -> dict:
    """Per-waypoint classification plus the route's most restrictive type."""
    return classifier.classify_route(body.waypoints).to_dict()
