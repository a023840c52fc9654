"""Headless console: run the simulation clock and log what happens.

    python -m chemview --seconds 30 --start
"""

from __future__ import annotations

import argparse
import asyncio

from chemview.clock import SimulationClock
from chemview.config import SimulationConfig
from chemview.logger import get_logger
from chemview.session import MixerSession

logger = get_logger("chemview")


async def run(seconds: float, start_mixer: bool, heater: bool) -> MixerSession:
    session = MixerSession(SimulationConfig.from_env())
    if start_mixer:
        decision = session.start()
        if not decision.allowed:
            logger.warning("Mixer not started: %s", decision.reason)
    if heater:
        session.toggle_heater()

    async with SimulationClock(session):
        await asyncio.sleep(seconds)

    plant = session.plant
    logger.info(
        "Final state: %.1f rpm, %.2f C, pH %.2f, valve %s",
        plant.speed_rpm,
        plant.temperature_c,
        plant.acidity,
        "OPEN" if plant.valve_open else "CLOSED",
    )
    return session


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the mixing tank simulation headless.")
    parser.add_argument("--seconds", type=float, default=30.0, help="How long to run.")
    parser.add_argument("--start", action="store_true", help="Start the mixer first.")
    parser.add_argument("--heater", action="store_true", help="Switch the heater on first.")
    args = parser.parse_args()
    asyncio.run(run(args.seconds, args.start, args.heater))


if __name__ == "__main__":
    main()
