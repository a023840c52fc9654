"""Physical constants, alert thresholds, and operating ranges for the mixing tank."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MixerLimits:
    """Alert and interlock thresholds."""

    # Overhead temperature alert (deg C); must exceed to trip
    temperature_alert: float = 85.0

    # Mixer efficiency alert while running (rpm)
    speed_low_alert: float = 100.0

    # Valve operation requires the agitator at or below this speed (rpm)
    valve_speed_interlock: float = 1.0

    # Automatic valve drift only happens below this speed (rpm)
    valve_drift_speed: float = 5.0


LIMITS = MixerLimits()


# Plant at console activation
INITIAL_PLANT = {
    "speed_rpm": 0.0,         # Agitator speed (rpm)
    "temperature_c": 24.5,    # Tank temperature (deg C)
    "acidity": 7.0,           # pH
    "valve_open": False,      # Discharge valve
}


# Operator command state at console activation
INITIAL_COMMANDS = {
    "running": False,
    "manual_mode": False,
    "heater_on": False,
    "target_speed_rpm": 500.0,
    "target_temperature_c": 60.0,
}


# Manual setpoint domains
SETPOINT_RANGES = {
    "target_speed_rpm": (0.0, 1500.0),
    "target_temperature_c": (20.0, 100.0),
}


# Per-tick dynamics
DYNAMICS = {
    "speed_decay": 15.0,          # rpm per tick when stopped
    "speed_smoothing": 0.1,       # first-order approach factor
    "auto_speed_base": 450.0,     # rpm
    "auto_speed_jitter": 50.0,    # rpm, uniform [0, jitter)
    "heat_rate": 0.15,            # deg C per tick below target
    "auto_temperature": 75.0,     # deg C heater target in auto mode
    "hold_noise": 0.05,           # deg C, uniform +/- at target
    "ambient_c": 22.0,            # deg C
    "cooling_rate": 0.05,         # deg C per tick with heater off
    "ambient_noise": 0.01,        # deg C, uniform +/- at ambient
    "acidity_base": 7.2,          # pH
    "acidity_spread": 0.4,        # pH, uniform [0, spread)
    "acidity_smoothing": 0.05,
    "valve_drift_probability": 0.02,
}


# Bounded history capacities
CAPACITIES = {
    "trend": 60,
    "traffic": 50,
    "audit": 50,
    "alerts": 5,
}
