"""Thermometer publishing readings to three async subscribers."""

from __future__ import annotations

import asyncio

from asyncevent import ThermometerConfig, from_sync
from asyncevent.cli import configure_logging, console
from asyncevent.thermometer import TemperatureChanged, Thermometer, default_subscribers


def warn_when_hot(sender: Thermometer, reading: TemperatureChanged) -> None:
    if reading.celsius > 21.0:
        console.print(f"[bold red]{reading.sensor} is running hot: {reading.celsius:.1f}°C[/bold red]")


async def main() -> None:
    config = ThermometerConfig.from_env()
    configure_logging(config.log_level)

    async with Thermometer(config) as thermometer:
        for subscriber in default_subscribers(delay=config.subscriber_delay):
            thermometer.temperature_changed += subscriber
        thermometer.temperature_changed += from_sync(warn_when_hot)

        await asyncio.sleep(config.startup_delay)
        thermometer.start_monitoring()
        await asyncio.sleep(15)


if __name__ == "__main__":
    asyncio.run(main())
