"""ChemView: simulated chemical mixing tank operator console."""

from chemview.config import SimulationConfig
from chemview.session import MixerSession
from chemview.clock import SimulationClock

__all__ = ["SimulationConfig", "MixerSession", "SimulationClock"]

__version__ = "1.0.0"
