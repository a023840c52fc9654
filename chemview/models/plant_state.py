"""Immutable plant and command state representations."""

from __future__ import annotations

import math
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict

from chemview.models.constants import SETPOINT_RANGES


@dataclass(frozen=True)
class PlantState:
    """Snapshot of the mixing tank.

    All values are physical quantities - the valve is the only discrete one.
    """

    speed_rpm: float        # Agitator speed (rpm), never negative
    temperature_c: float    # Tank temperature (deg C)
    acidity: float          # pH, expected near 0-14
    valve_open: bool        # Discharge valve

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> PlantState:
        valid_keys = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in valid_keys})


@dataclass(frozen=True)
class CommandState:
    """Operator intent consumed by the process model on every tick.

    Setpoints are clamped into SETPOINT_RANGES whenever a state is built,
    including through dataclasses.replace().
    """

    running: bool
    manual_mode: bool
    heater_on: bool
    target_speed_rpm: float         # Manual setpoint, 0-1500 rpm
    target_temperature_c: float     # Manual setpoint, 20-100 deg C

    def __post_init__(self):
        for key in SETPOINT_RANGES:
            object.__setattr__(self, key, clamp_setpoint(key, getattr(self, key)))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> CommandState:
        valid_keys = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in valid_keys})


def clamp_setpoint(key: str, value: float) -> float:
    """Clamp a manual setpoint into its operating domain.

    Raises:
        ValueError: If value is NaN, which has no place in the domain.
    """
    value = float(value)
    if math.isnan(value):
        raise ValueError(f"{key} must be a number, got {value}")
    lo, hi = SETPOINT_RANGES[key]
    return min(max(value, lo), hi)
