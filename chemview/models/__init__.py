from chemview.models.constants import (
    LIMITS,
    INITIAL_PLANT,
    INITIAL_COMMANDS,
    SETPOINT_RANGES,
    DYNAMICS,
    CAPACITIES,
)
from chemview.models.plant_state import PlantState, CommandState, clamp_setpoint

__all__ = [
    "LIMITS",
    "INITIAL_PLANT",
    "INITIAL_COMMANDS",
    "SETPOINT_RANGES",
    "DYNAMICS",
    "CAPACITIES",
    "PlantState",
    "CommandState",
    "clamp_setpoint",
]
