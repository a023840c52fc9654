"""Console session: owned plant state plus the operator command surface.

One MixerSession is built per running console. It owns the plant and
command state, the bounded histories, the process model and the alerting
engine. Every mutation runs to completion under a single lock, whether it
comes from the plant driver, the alert driver, or an operator command.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, Optional, Tuple

import numpy as np

from chemview.alerts.advisor import Advisor, AlertContext, Advisory
from chemview.alerts.engine import AlertingEngine
from chemview.config import SimulationConfig
from chemview.history.buffers import (
    AlertList,
    AlertRecord,
    AuditLog,
    AuditRecord,
    Direction,
    Sample,
    Severity,
    TrafficLog,
    TrafficRecord,
    TrendSeries,
)
from chemview.logger import get_logger
from chemview.models.constants import INITIAL_COMMANDS, INITIAL_PLANT
from chemview.models.mixer import ProcessModel
from chemview.models.plant_state import CommandState, PlantState, clamp_setpoint
from chemview.protocol.frames import read_frame, write_frame
from chemview.safety.interlocks import (
    ALLOWED,
    InterlockDecision,
    can_start,
    can_toggle_valve,
    interlock_active,
)

logger = get_logger("chemview.session")

# Simulated gateway round trip, uniform [base, base + spread) ms
LATENCY_BASE_MS = 12.0
LATENCY_SPREAD_MS = 6.0


class MixerSession:
    """State owner and command surface for one console."""

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        rng=None,
        advisor: Optional[Advisor] = None,
        plant: Optional[PlantState] = None,
        commands: Optional[CommandState] = None,
    ):
        self.config = config or SimulationConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.model = ProcessModel(rng=self.rng)

        self._lock = threading.RLock()
        self._plant = plant or PlantState.from_dict(INITIAL_PLANT)
        self._commands = commands or CommandState.from_dict(INITIAL_COMMANDS)

        caps = self.config.capacities
        self._speed_trend = TrendSeries(capacity=caps["trend"])
        self._temperature_trend = TrendSeries(capacity=caps["trend"])
        self._traffic = TrafficLog(capacity=caps["traffic"])
        self._audit = AuditLog(capacity=caps["audit"])
        self._alerts = AlertList(capacity=caps["alerts"])
        self.engine = AlertingEngine(self._alerts, self._audit, advisor=advisor)

        self._packet_count = 0
        self._latency_ms = LATENCY_BASE_MS

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def plant(self) -> PlantState:
        with self._lock:
            return self._plant

    @property
    def commands(self) -> CommandState:
        with self._lock:
            return self._commands

    @property
    def speed_trend(self) -> Tuple[Sample, ...]:
        with self._lock:
            return self._speed_trend.snapshot()

    @property
    def temperature_trend(self) -> Tuple[Sample, ...]:
        with self._lock:
            return self._temperature_trend.snapshot()

    @property
    def traffic(self) -> Tuple[TrafficRecord, ...]:
        with self._lock:
            return self._traffic.snapshot()

    @property
    def audit(self) -> Tuple[AuditRecord, ...]:
        with self._lock:
            return self._audit.snapshot()

    @property
    def alerts(self) -> Tuple[AlertRecord, ...]:
        with self._lock:
            return self._alerts.snapshot()

    def gateway_stats(self) -> Dict[str, float]:
        with self._lock:
            return {
                "packet_count": self._packet_count,
                "latency_ms": self._latency_ms,
                "buffer_used": len(self._traffic),
                "buffer_capacity": self._traffic.capacity,
            }

    def status(self) -> Dict[str, str]:
        """Summary line shown in the console footer."""
        with self._lock:
            plant, cmd = self._plant, self._commands
            if cmd.running and plant.speed_rpm > 10:
                state = "MIXING"
            elif cmd.heater_on:
                state = "HEATING"
            else:
                state = "IDLE"
            return {
                "state": state,
                "interlock": "ACTIVE" if interlock_active(plant, cmd.running) else "INACTIVE",
                "heater": "ON" if cmd.heater_on else "OFF",
                "lock": "READY" if can_toggle_valve(plant, False).allowed else "BUSY",
            }

    # ------------------------------------------------------------------
    # Periodic work
    # ------------------------------------------------------------------

    def plant_tick(self) -> PlantState:
        """Advance the plant one tick and record the telemetry it produces."""
        with self._lock:
            prev = self._plant
            self._plant = self.model.step(prev, self._commands)
            self._speed_trend.record(self._plant.speed_rpm)
            self._temperature_trend.record(self._plant.temperature_c)

            self._latency_ms = LATENCY_BASE_MS + float(self.rng.uniform(0.0, LATENCY_SPREAD_MS))
            self._emit(Direction.RX)
            if self._plant.valve_open != prev.valve_open:
                logger.info(
                    "Discharge valve drifted %s", "OPEN" if self._plant.valve_open else "CLOSED"
                )
                self._emit(Direction.TX)
            return self._plant

    def alert_context(self) -> AlertContext:
        """Snapshot of what the advisor needs, taken under the lock."""
        with self._lock:
            return AlertContext(
                plant=self._plant,
                running=self._commands.running,
                speed_history=self._speed_trend.snapshot(),
                temperature_history=self._temperature_trend.snapshot(),
            )

    def commit_advisory(self, advisory: Advisory) -> Optional[AlertRecord]:
        with self._lock:
            return self.engine.commit(advisory)

    def evaluate_alerts(self) -> Optional[AlertRecord]:
        """Run one alert evaluation without any simulated latency."""
        advisory = self.engine.assess(self.alert_context())
        return self.commit_advisory(advisory)

    # ------------------------------------------------------------------
    # Command surface
    # ------------------------------------------------------------------

    def start(self, operator: Optional[str] = None) -> InterlockDecision:
        with self._lock:
            if self._commands.running:
                return ALLOWED
            decision = can_start(self._plant)
            if not decision.allowed:
                logger.warning("Start refused: %s", decision.reason)
                return decision
            self._commands = replace(self._commands, running=True)
            self._applied(f"Mixer STARTED by {self._who(operator)}")
            return decision

    def stop(self, operator: Optional[str] = None) -> InterlockDecision:
        with self._lock:
            if not self._commands.running:
                return ALLOWED
            self._commands = replace(self._commands, running=False)
            self._applied(f"Mixer STOPPED by {self._who(operator)}")
            return ALLOWED

    def toggle_running(self, operator: Optional[str] = None) -> InterlockDecision:
        with self._lock:
            if self._commands.running:
                return self.stop(operator)
            return self.start(operator)

    def emergency_stop(self, operator: Optional[str] = None) -> AuditRecord:
        """Stop everything immediately. Bypasses every interlock."""
        with self._lock:
            self._commands = replace(self._commands, running=False, heater_on=False)
            self._plant = replace(self._plant, speed_rpm=0.0)
            self._emit(Direction.TX)
            record = self._audit.append(
                f"EMERGENCY STOP TRIGGERED BY {self._who(operator).upper()}", Severity.HIGH
            )
            logger.warning(record.message)
            return record

    def toggle_mode(self, operator: Optional[str] = None) -> InterlockDecision:
        with self._lock:
            manual = not self._commands.manual_mode
            self._commands = replace(self._commands, manual_mode=manual)
            mode = "MANUAL" if manual else "AUTO"
            self._applied(f"Control mode set to {mode} by {self._who(operator)}")
            return ALLOWED

    def toggle_heater(self, operator: Optional[str] = None) -> InterlockDecision:
        with self._lock:
            heater_on = not self._commands.heater_on
            self._commands = replace(self._commands, heater_on=heater_on)
            self._applied(
                f"Heater System {'ACTIVATED' if heater_on else 'DEACTIVATED'} "
                f"by {self._who(operator)} - Setpoint: "
                f"{self._commands.target_temperature_c:.1f} C"
            )
            return ALLOWED

    def toggle_valve(self, operator: Optional[str] = None) -> InterlockDecision:
        with self._lock:
            decision = can_toggle_valve(self._plant, self._commands.running)
            if not decision.allowed:
                logger.warning("Valve operation refused: %s", decision.reason)
                return decision
            valve_open = not self._plant.valve_open
            self._plant = replace(self._plant, valve_open=valve_open)
            self._applied(
                f"Discharge Valve {'OPENED' if valve_open else 'CLOSED'} by {self._who(operator)}"
            )
            return decision

    def set_target_speed(self, rpm: float, operator: Optional[str] = None) -> InterlockDecision:
        with self._lock:
            value = clamp_setpoint("target_speed_rpm", rpm)
            self._commands = replace(self._commands, target_speed_rpm=value)
            self._applied(f"Speed setpoint set to {value:.0f} rpm by {self._who(operator)}")
            return ALLOWED

    def set_target_temperature(
        self, celsius: float, operator: Optional[str] = None
    ) -> InterlockDecision:
        with self._lock:
            value = clamp_setpoint("target_temperature_c", celsius)
            self._commands = replace(self._commands, target_temperature_c=value)
            self._applied(
                f"Temperature setpoint set to {value:.1f} C by {self._who(operator)}"
            )
            return ALLOWED

    # ------------------------------------------------------------------

    def _who(self, operator: Optional[str]) -> str:
        return operator or self.config.operator

    def _emit(self, direction: Direction) -> TrafficRecord:
        frame = read_frame(self.rng) if direction == Direction.RX else write_frame(self.rng)
        self._packet_count += 1
        return self._traffic.append(direction, frame)

    def _applied(self, message: str) -> AuditRecord:
        self._emit(Direction.TX)
        logger.info(message)
        return self._audit.append(message, Severity.LOW)
