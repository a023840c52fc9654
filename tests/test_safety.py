"""Tests for the agitator / discharge valve interlocks."""

import pytest

from chemview.models.constants import INITIAL_PLANT, LIMITS
from chemview.models.plant_state import PlantState
from chemview.safety.interlocks import (
    START_DENIED,
    VALVE_DENIED,
    InterlockDecision,
    can_start,
    can_toggle_valve,
    interlock_active,
)


def _make_state(**overrides) -> PlantState:
    """Create a PlantState with optional overrides from the initial plant."""
    return PlantState.from_dict({**INITIAL_PLANT, **overrides})


# ---------------------------------------------------------------------------
# Start interlock
# ---------------------------------------------------------------------------


class TestStartInterlock:
    def test_allowed_with_valve_closed(self):
        decision = can_start(_make_state(valve_open=False))
        assert decision.allowed
        assert decision.reason is None

    def test_denied_with_valve_open(self):
        decision = can_start(_make_state(valve_open=True))
        assert not decision.allowed
        assert decision.reason == START_DENIED

    @pytest.mark.parametrize("speed", [0.0, 0.5, 100.0, 1500.0])
    @pytest.mark.parametrize("temperature", [20.0, 60.0, 95.0])
    @pytest.mark.parametrize("acidity", [2.0, 7.2, 12.0])
    def test_open_valve_always_denies(self, speed, temperature, acidity):
        state = _make_state(
            valve_open=True, speed_rpm=speed, temperature_c=temperature, acidity=acidity
        )
        assert not can_start(state).allowed


# ---------------------------------------------------------------------------
# Valve interlock
# ---------------------------------------------------------------------------


class TestValveInterlock:
    def test_allowed_at_rest(self):
        assert can_toggle_valve(_make_state(speed_rpm=0.0), running=False).allowed

    def test_denied_while_running(self):
        decision = can_toggle_valve(_make_state(speed_rpm=0.0), running=True)
        assert not decision.allowed
        assert decision.reason == VALVE_DENIED

    def test_denied_while_spinning_down(self):
        decision = can_toggle_valve(_make_state(speed_rpm=40.0), running=False)
        assert not decision.allowed

    def test_exact_threshold_denies(self):
        """At exactly the threshold the agitator is not near-zero."""
        state = _make_state(speed_rpm=LIMITS.valve_speed_interlock)
        assert not can_toggle_valve(state, running=False).allowed

    def test_just_below_threshold_allows(self):
        state = _make_state(speed_rpm=LIMITS.valve_speed_interlock - 0.01)
        assert can_toggle_valve(state, running=False).allowed

    def test_valve_position_irrelevant(self):
        state = _make_state(speed_rpm=0.0, valve_open=True)
        assert can_toggle_valve(state, running=False).allowed


# ---------------------------------------------------------------------------
# Decisions and status
# ---------------------------------------------------------------------------


class TestDecisions:
    def test_decision_truthiness(self):
        assert InterlockDecision(allowed=True)
        assert not InterlockDecision(allowed=False, reason="x")

    def test_interlock_inactive_at_rest(self):
        assert not interlock_active(_make_state(), running=False)

    def test_interlock_active_with_valve_open(self):
        assert interlock_active(_make_state(valve_open=True), running=False)

    def test_interlock_active_while_running(self):
        assert interlock_active(_make_state(), running=True)
