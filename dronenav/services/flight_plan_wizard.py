"""Four-step flight planning wizard: Intent → Location → Flight → Results.

The wizard is stateless; every operation takes the caller's
:class:`FlightPlan` and mutates it in place.  There is no shared plan.

Transitions
-----------
- ``next_step`` advances only when the current step is complete.  Leaving
  step 3 computes the results before entering step 4.
- ``prev_step`` goes back one step; ``set_step`` jumps within [1, 4].
- ``ensure_results`` is the recovery path for a plan sitting on step 4
  without results.

Derived data
------------
- ``location.airspace_type`` is recomputed by an explicit classifier call
  inside ``update_location`` whenever the coordinates change, even while
  step 2 is still incomplete.
- ``results`` are computed once and kept.  Editing intent, location or
  flight discards them; they are rebuilt on the next step 3 → 4 move.
"""

from __future__ import annotations

import logging
from typing import Any

from dronenav.contracts.enums import WizardStep
from dronenav.contracts.flight_plan import (
    FlightDetails,
    FlightIntent,
    FlightPlan,
    FlightResults,
    Location,
)
from dronenav.services.classifier import ContainmentClassifier
from dronenav.services.regulation_resolver import RegulationResolver

logger = logging.getLogger(__name__)

FIRST_STEP = WizardStep.INTENT.value
LAST_STEP = WizardStep.RESULTS.value


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


class FlightPlanWizard:
    """Drives a caller-owned flight plan through the wizard steps."""

    def __init__(self, classifier: ContainmentClassifier, resolver: RegulationResolver):
        self._classifier = classifier
        self._resolver = resolver

    # ------------------------------------------------------------------
    # Step navigation
    # ------------------------------------------------------------------

    def next_step(self, plan: FlightPlan) -> bool:
        """Advance one step. Returns whether the plan moved."""
        if plan.step >= LAST_STEP or not self.is_step_complete(plan, plan.step):
            return False
        if plan.step == WizardStep.FLIGHT.value and self.generate_results(plan) is None:
            return False
        plan.step += 1
        return True

    def prev_step(self, plan: FlightPlan) -> bool:
        if plan.step <= FIRST_STEP:
            return False
        plan.step -= 1
        return True

    def set_step(self, plan: FlightPlan, step: int) -> bool:
        """Jump directly to *step*; out-of-range values are ignored."""
        if not FIRST_STEP <= step <= LAST_STEP:
            return False
        plan.step = step
        return True

    def is_step_complete(self, plan: FlightPlan, step: int) -> bool:
        """Completeness predicate gating ``next_step`` for each step."""
        if step == WizardStep.INTENT.value:
            intent = plan.intent
            return intent is not None and all(
                _is_set(v) for v in (intent.purpose, intent.drone_pilot_type, intent.drone_category)
            )
        if step == WizardStep.LOCATION.value:
            location = plan.location
            return (
                location is not None
                and location.coordinates is not None
                and _is_set(location.location_type)
            )
        if step == WizardStep.FLIGHT.value:
            flight = plan.flight
            return flight is not None and all(
                _is_set(v) for v in (flight.date, flight.time, flight.altitude)
            )
        if step == WizardStep.RESULTS.value:
            return plan.results is not None
        return False

    # ------------------------------------------------------------------
    # Section updates
    # ------------------------------------------------------------------

    def update_intent(self, plan: FlightPlan, **changes: Any) -> FlightIntent:
        plan.intent = _merge(FlightIntent, plan.intent, changes)
        plan.results = None
        return plan.intent

    def update_location(self, plan: FlightPlan, **changes: Any) -> Location:
        """Merge location edits and reclassify when the coordinates moved."""
        changes.pop("airspace_type", None)
        previous = plan.location.coordinates if plan.location else None
        location = _merge(Location, plan.location, changes)

        if location.coordinates is None:
            location.airspace_type = None
        elif location.coordinates != previous or location.airspace_type is None:
            location.airspace_type = self._classifier.classify(location.coordinates)

        plan.location = location
        plan.results = None
        return location

    def update_flight(self, plan: FlightPlan, **changes: Any) -> FlightDetails:
        plan.flight = _merge(FlightDetails, plan.flight, changes)
        plan.results = None
        return plan.flight

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def generate_results(self, plan: FlightPlan) -> FlightResults | None:
        """Compute the plan's results, or return ``None`` if inputs are missing.

        Intent, location and flight must all pass their step checks, however
        the plan reached its current step.  Results already present are
        returned unchanged.
        """
        if plan.results is not None:
            return plan.results
        for step in (WizardStep.INTENT, WizardStep.LOCATION, WizardStep.FLIGHT):
            if not self.is_step_complete(plan, step.value):
                logger.debug("Flight plan step %d incomplete, results not generated", step.value)
                return None

        zones = self._classifier.zones_containing(plan.location.coordinates)
        plan.results = self._resolver.build_results(plan.intent, plan.location, plan.flight, zones)
        return plan.results

    def ensure_results(self, plan: FlightPlan) -> FlightResults | None:
        """Recover a plan that reached the results step without results."""
        if plan.step == LAST_STEP and plan.results is None:
            logger.info("Results missing on step %d, regenerating", plan.step)
            return self.generate_results(plan)
        return plan.results

    def reset(self, plan: FlightPlan) -> None:
        """Discard everything and return to step 1."""
        plan.step = FIRST_STEP
        plan.intent = None
        plan.location = None
        plan.flight = None
        plan.results = None


def _merge(model: type, current: Any, changes: dict[str, Any]) -> Any:
    """Validate *current* updated with *changes* as a fresh *model*."""
    base = current.model_dump() if current is not None else {}
    return model.model_validate({**base, **changes})
