"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends, Request

from dronenav.services.classifier import ContainmentClassifier
from dronenav.services.engine import PlanningEngine
from dronenav.services.flight_plan_wizard import FlightPlanWizard
from dronenav.services.regulation_resolver import RegulationResolver
from dronenav.services.zone_registry import ZoneRegistry


# ------------------------------------------------------------------
# Planning engine (singleton from app.state)
# ------------------------------------------------------------------


def get_engine(request: Request) -> PlanningEngine:
    return request.app.state.engine


def get_registry(engine: PlanningEngine = Depends(get_engine)) -> ZoneRegistry:
    return engine.registry


def get_classifier(engine: PlanningEngine = Depends(get_engine)) -> ContainmentClassifier:
    return engine.classifier


def get_resolver(engine: PlanningEngine = Depends(get_engine)) -> RegulationResolver:
    return engine.resolver


def get_wizard(engine: PlanningEngine = Depends(get_engine)) -> FlightPlanWizard:
    return engine.wizard
