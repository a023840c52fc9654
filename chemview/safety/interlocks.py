"""Interlock authority for the mixing tank.

Two hard interlocks between the agitator motor and the discharge valve:

Start interlock:  the mixer may not start while the discharge valve is open.
Valve interlock:  the valve may not move while the mixer is commanded to run
                  or the agitator is still turning.

Both checks are pure. A denial is an ordinary result, not an exception; the
caller decides how to present it to the operator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from chemview.models.constants import LIMITS
from chemview.models.plant_state import PlantState

START_DENIED = "valve must be closed before starting."
VALVE_DENIED = "speed must reach near-zero before valve operation."


@dataclass(frozen=True)
class InterlockDecision:
    """Outcome of an interlock check."""

    allowed: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.allowed


ALLOWED = InterlockDecision(allowed=True)


def can_start(plant: PlantState) -> InterlockDecision:
    """Check whether the agitator may be started."""
    if plant.valve_open:
        return InterlockDecision(allowed=False, reason=START_DENIED)
    return ALLOWED


def can_toggle_valve(plant: PlantState, running: bool) -> InterlockDecision:
    """Check whether the discharge valve may be opened or closed.

    Args:
        plant: Current plant snapshot.
        running: Whether the agitator is commanded to run.
    """
    if running or plant.speed_rpm >= LIMITS.valve_speed_interlock:
        return InterlockDecision(allowed=False, reason=VALVE_DENIED)
    return ALLOWED


def interlock_active(plant: PlantState, running: bool) -> bool:
    """True while any interlock would refuse an operator action."""
    return not can_start(plant).allowed or not can_toggle_valve(plant, running).allowed
