"""Mixing tank process model.

First-order agitator dynamics, a linear heater ramp with noise-only hold,
and a slow stochastic acidity drift. One call to advance() is one tick.
The random source is injected so tests can pin the noise terms.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from chemview.models.constants import DYNAMICS, LIMITS
from chemview.models.plant_state import CommandState, PlantState
from chemview.safety.interlocks import can_toggle_valve


def advance(prev: PlantState, cmd: CommandState, rng) -> PlantState:
    """Compute the next plant state from the previous one and the commands.

    Args:
        prev: Plant state at the start of the tick.
        cmd: Operator commands in force for this tick.
        rng: Random source exposing uniform() and random(), normally a
             numpy Generator.

    Returns:
        A new PlantState; prev is not modified.
    """
    return PlantState(
        speed_rpm=_next_speed(prev.speed_rpm, cmd, rng),
        temperature_c=_next_temperature(prev.temperature_c, cmd, rng),
        acidity=_next_acidity(prev.acidity, rng),
        valve_open=_next_valve(prev, cmd, rng),
    )


def _next_speed(speed: float, cmd: CommandState, rng) -> float:
    if not cmd.running:
        return max(0.0, speed - DYNAMICS["speed_decay"])

    if cmd.manual_mode:
        target = cmd.target_speed_rpm
    else:
        target = DYNAMICS["auto_speed_base"] + rng.uniform(0.0, DYNAMICS["auto_speed_jitter"])
    return max(0.0, float(speed + (target - speed) * DYNAMICS["speed_smoothing"]))


def _next_temperature(temp: float, cmd: CommandState, rng) -> float:
    if cmd.heater_on:
        target = cmd.target_temperature_c if cmd.manual_mode else DYNAMICS["auto_temperature"]
        if temp < target:
            return temp + DYNAMICS["heat_rate"]
        noise = DYNAMICS["hold_noise"]
        return float(temp + rng.uniform(-noise, noise))

    if temp > DYNAMICS["ambient_c"]:
        return temp - DYNAMICS["cooling_rate"]
    noise = DYNAMICS["ambient_noise"]
    return float(temp + rng.uniform(-noise, noise))


def _next_acidity(acidity: float, rng) -> float:
    target = DYNAMICS["acidity_base"] + rng.uniform(0.0, DYNAMICS["acidity_spread"])
    return float(acidity + (target - acidity) * DYNAMICS["acidity_smoothing"])


def _next_valve(prev: PlantState, cmd: CommandState, rng) -> bool:
    # Spontaneous drift only in auto mode with the agitator at rest
    if cmd.manual_mode or cmd.running:
        return prev.valve_open
    if prev.speed_rpm >= LIMITS.valve_drift_speed:
        return prev.valve_open
    if not can_toggle_valve(prev, cmd.running).allowed:
        return prev.valve_open
    if rng.random() < DYNAMICS["valve_drift_probability"]:
        return not prev.valve_open
    return prev.valve_open


class ProcessModel:
    """Mixing tank simulator bound to one random source."""

    def __init__(self, rng=None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def step(self, prev: PlantState, cmd: CommandState) -> PlantState:
        """Advance one tick without touching any stored state."""
        return advance(prev, cmd, self.rng)
