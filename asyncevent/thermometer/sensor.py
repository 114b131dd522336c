"""Simulated thermometer publishing temperature readings."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from random import Random

from ..config import ThermometerConfig
from ..domain.event import AsyncEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TemperatureChanged:
    celsius: float
    sensor: str = "thermometer"
    measured_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Thermometer:
    """Publishes a random-walk temperature until stopped.

    Each reading waits for every subscriber to finish before the next one is
    generated, so slow subscribers slow down publication.
    """

    def __init__(self, config: ThermometerConfig | None = None, *, rng: Random | None = None) -> None:
        self.config = config or ThermometerConfig()
        self.config.validate()
        self.temperature_changed: AsyncEvent[TemperatureChanged] = AsyncEvent("temperature_changed")
        self.current_celsius = self.config.initial_celsius
        self.readings_published = 0
        self._rng = rng or (
            Random(self.config.rng_seed) if self.config.rng_seed is not None else Random()
        )
        self._monitor_task: asyncio.Task[None] | None = None

    @property
    def is_monitoring(self) -> bool:
        return self._monitor_task is not None and not self._monitor_task.done()

    def start_monitoring(self) -> None:
        if self.is_monitoring:
            raise RuntimeError("Thermometer is already monitoring")
        self._monitor_task = asyncio.create_task(self._monitor_and_publish())

    async def stop(self) -> None:
        task, self._monitor_task = self._monitor_task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def publish_reading(self) -> None:
        """Take one reading and, if anyone listens, wait for every subscriber."""
        self.current_celsius = self._next_temperature()
        if not len(self.temperature_changed):
            return
        reading = TemperatureChanged(self.current_celsius, sensor=self.config.sensor_name)
        logger.info("Publishing new temperature: %.1f°C", reading.celsius)
        completion = self.temperature_changed.invoke_all(self, reading)
        try:
            await completion
        except Exception:
            for error in completion.exceptions():
                logger.warning(
                    "Subscriber failed to handle temperature %.1f°C",
                    reading.celsius,
                    exc_info=error,
                )
        self.readings_published += 1
        logger.info("Finished publishing temperature")

    async def _monitor_and_publish(self) -> None:
        while True:
            await self.publish_reading()
            await asyncio.sleep(
                self._rng.uniform(self.config.min_interval, self.config.max_interval)
            )

    def _next_temperature(self) -> float:
        return self.current_celsius + (self._rng.random() - 0.5) * 2

    async def __aenter__(self) -> "Thermometer":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()
