"""Advisory interface and the default rule-table advisor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Tuple

from chemview.history.buffers import Sample, Severity
from chemview.models.constants import LIMITS, MixerLimits
from chemview.models.plant_state import PlantState

OVERHEAT_MESSAGE = "Overheating detected in mixing tank. Recommend cooling cycle."
LOW_EFFICIENCY_MESSAGE = "Mixer efficiency low. Check motor load."
NOMINAL_MESSAGE = "System operating within optimal parameters."


@dataclass(frozen=True)
class AlertContext:
    """Everything an advisor may look at for one evaluation."""

    plant: PlantState
    running: bool
    speed_history: Tuple[Sample, ...] = ()
    temperature_history: Tuple[Sample, ...] = ()
    limits: MixerLimits = field(default=LIMITS)


@dataclass(frozen=True)
class Advisory:
    """Message and severity chosen by an advisor."""

    message: str
    severity: Severity


class Advisor(ABC):
    """Base class for advisory text sources."""

    @abstractmethod
    def advise(self, context: AlertContext) -> Advisory:
        """Select a message and severity for the given reading."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable advisor name."""


class RuleAdvisor(Advisor):
    """Threshold rule table; the first matching rule wins."""

    @property
    def name(self) -> str:
        return "Rule table"

    def advise(self, context: AlertContext) -> Advisory:
        plant = context.plant
        limits = context.limits

        if plant.temperature_c > limits.temperature_alert:
            return Advisory(OVERHEAT_MESSAGE, Severity.HIGH)

        if context.running and plant.speed_rpm < limits.speed_low_alert:
            return Advisory(LOW_EFFICIENCY_MESSAGE, Severity.MEDIUM)

        return Advisory(NOMINAL_MESSAGE, Severity.LOW)
