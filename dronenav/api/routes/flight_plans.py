"""Stateless flight plan evaluation endpoint.

The web application keeps the wizard state client-side and posts the three
input sections once the pilot reaches the results step.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from dronenav.api.deps import get_wizard
from dronenav.contracts.common import CatalogModel
from dronenav.contracts.enums import WizardStep
from dronenav.contracts.flight_plan import FlightDetails, FlightIntent, FlightPlan, Location
from dronenav.services.flight_plan_wizard import FlightPlanWizard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flight-plans", tags=["flight-plans"])


class EvaluateRequest(CatalogModel):
    intent: FlightIntent
    location: Location
    flight: FlightDetails


@router.post("/evaluate")
async def evaluate(
    body: EvaluateRequest,
    wizard: FlightPlanWizard = Depends(get_wizard),
) -> dict:
    """Run the wizard over a complete plan and return it with its results."""
    plan = FlightPlan()
    wizard.update_intent(plan, **body.intent.model_dump())
    wizard.update_location(plan, **body.location.model_dump())
    wizard.update_flight(plan, **body.flight.model_dump())

    for step in (WizardStep.INTENT, WizardStep.LOCATION, WizardStep.FLIGHT):
        if not wizard.next_step(plan):
            logger.debug("Flight plan evaluation stopped at step %d", plan.step)
            raise HTTPException(
                status_code=422,
                detail=f"Flight plan step {step.value} ({step.name.lower()}) is incomplete",
            )

    return plan.to_dict()
