"""Simulation clock: the two periodic drivers of a console session.

Plant driver   every tick_interval_s, advances the process model and
               records telemetry.
Alert driver   every alert_interval_s, launches an evaluation that
               snapshots state, suspends for the analysis delay with the
               session lock released, then re-takes the lock to commit.

Evaluations are independent tasks so a slow advisor never holds up either
driver; results land in completion order. stop() cancels the drivers and
every evaluation still in flight.
"""

from __future__ import annotations

import asyncio
from typing import Optional, Set

from chemview.history.buffers import AlertRecord
from chemview.logger import get_logger
from chemview.session import MixerSession

logger = get_logger("chemview.clock")


class SimulationClock:
    """Periodic scheduler bound to one MixerSession."""

    def __init__(self, session: MixerSession):
        self.session = session
        self.config = session.config
        self._plant_task: Optional[asyncio.Task] = None
        self._alert_task: Optional[asyncio.Task] = None
        self._evaluations: Set[asyncio.Task] = set()
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._plant_task is not None

    async def start(self) -> None:
        if self.running:
            return
        self._plant_task = asyncio.create_task(self._plant_loop(), name="plant-driver")
        self._alert_task = asyncio.create_task(self._alert_loop(), name="alert-driver")
        logger.info(
            "Clock started (tick %.2fs, alerts %.2fs)",
            self.config.tick_interval_s,
            self.config.alert_interval_s,
        )

    async def stop(self) -> None:
        tasks = [t for t in (self._plant_task, self._alert_task) if t is not None]
        tasks.extend(self._evaluations)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._plant_task = None
        self._alert_task = None
        self._evaluations.clear()
        if tasks:
            logger.info("Clock stopped after %d ticks", self.ticks)

    async def __aenter__(self) -> SimulationClock:
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    async def evaluate_alerts(self) -> Optional[AlertRecord]:
        """One alert evaluation with the simulated analysis latency."""
        context = self.session.alert_context()
        if self.config.analysis_delay_s > 0:
            await asyncio.sleep(self.config.analysis_delay_s)
        advisory = self.session.engine.assess(context)
        return self.session.commit_advisory(advisory)

    async def _plant_loop(self) -> None:
        while True:
            await asyncio.sleep(self.config.tick_interval_s)
            self.session.plant_tick()
            self.ticks += 1

    async def _alert_loop(self) -> None:
        while True:
            await asyncio.sleep(self.config.alert_interval_s)
            task = asyncio.create_task(self._guarded_evaluation())
            self._evaluations.add(task)
            task.add_done_callback(self._evaluations.discard)

    async def _guarded_evaluation(self) -> None:
        try:
            await self.evaluate_alerts()
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception(
                "Alert evaluation by %s failed; result dropped", self.session.engine.advisor.name
            )
