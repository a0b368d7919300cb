"""Regulation catalog endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from dronenav.api.deps import get_resolver
from dronenav.contracts.enums import OperatorType
from dronenav.services.regulation_resolver import RegulationResolver

router = APIRouter(prefix="/regulations", tags=["regulations"])


@router.get("")
async def list_regulations(
    operator: OperatorType | None = None,
    resolver: RegulationResolver = Depends(get_resolver),
) -> list[dict]:
    """All regulations, or those listing *operator* in ``applicableTo``."""
    regulations = resolver.regulations
    if operator is not None:
        regulations = [
            r for r in regulations if operator.value in {tag.lower() for tag in r.applicable_to}
        ]
    return [r.to_dict() for r in regulations]


@router.get("/{regulation_id}")
async def get_regulation(
    regulation_id: str,
    resolver: RegulationResolver = Depends(get_resolver),
) -> dict:
    regulation = resolver.by_id(regulation_id)
    if regulation is None:
        raise HTTPException(status_code=404, detail="Regulation not found")
    return regulation.to_dict()
