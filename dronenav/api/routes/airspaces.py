"""Airspace zone catalog endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from dronenav.api.deps import get_registry
from dronenav.contracts.enums import ZoneType
from dronenav.services.zone_registry import ZoneRegistry

router = APIRouter(prefix="/airspaces", tags=["airspaces"])


@router.get("")
async def list_airspaces(
    type: ZoneType | None = None,
    registry: ZoneRegistry = Depends(get_registry),
) -> list[dict]:
    """All zones, optionally filtered by type."""
    zones = registry.by_type(type) if type is not None else registry.list_all()
    return [z.to_dict() for z in zones]


@router.get("/{zone_id}")
async def get_airspace(
    zone_id: str,
    registry: ZoneRegistry = Depends(get_registry),
) -> dict:
    zone = registry.by_id(zone_id)
    if zone is None:
        raise HTTPException(status_code=404, detail="Airspace zone not found")
    return zone.to_dict()
