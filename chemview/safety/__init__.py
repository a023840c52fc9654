from chemview.safety.interlocks import (
    InterlockDecision,
    can_start,
    can_toggle_valve,
    interlock_active,
)

__all__ = ["InterlockDecision", "can_start", "can_toggle_valve", "interlock_active"]
