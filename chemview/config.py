"""Runtime configuration for a console session."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from chemview.models.constants import CAPACITIES


@dataclass(frozen=True)
class SimulationConfig:
    """Cadences, random seed, and buffer sizes for one session."""

    tick_interval_s: float = 1.0       # plant driver period
    alert_interval_s: float = 5.0      # alert driver period
    analysis_delay_s: float = 0.8      # simulated advisory latency
    seed: Optional[int] = None         # None draws fresh entropy
    operator: str = "Operator"         # attribution for audit entries
    capacities: Dict[str, int] = field(default_factory=lambda: dict(CAPACITIES))

    def __post_init__(self) -> None:
        if self.tick_interval_s <= 0:
            raise ValueError(f"tick_interval_s must be positive, got {self.tick_interval_s}")
        if self.alert_interval_s <= 0:
            raise ValueError(f"alert_interval_s must be positive, got {self.alert_interval_s}")
        if self.analysis_delay_s < 0:
            raise ValueError(f"analysis_delay_s must not be negative, got {self.analysis_delay_s}")
        for name in CAPACITIES:
            if self.capacities.get(name, 0) < 1:
                raise ValueError(f"capacity '{name}' must be at least 1")

    @classmethod
    def from_env(cls) -> SimulationConfig:
        """Build a config from CHEMVIEW_* environment variables."""
        seed = os.getenv("CHEMVIEW_SEED")
        return cls(
            tick_interval_s=float(os.getenv("CHEMVIEW_TICK_S", "1.0")),
            alert_interval_s=float(os.getenv("CHEMVIEW_ALERT_S", "5.0")),
            analysis_delay_s=float(os.getenv("CHEMVIEW_ANALYSIS_DELAY_S", "0.8")),
            seed=int(seed) if seed else None,
            operator=os.getenv("CHEMVIEW_OPERATOR", "Operator"),
        )
