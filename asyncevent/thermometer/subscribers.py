"""Console subscribers converting readings into different units."""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Any, Callable

from rich.console import Console

from ..domain.handlers import AsyncEventHandler
from .sensor import TemperatureChanged

ConvertTemperature = Callable[[float], float]

console = Console()


def create_subscriber(
    subscriber_id: int,
    convert: ConvertTemperature,
    units: str,
    *,
    delay: float = 0.5,
    output: Console | None = None,
) -> AsyncEventHandler[TemperatureChanged]:
    target = output or console

    async def subscriber(sender: Any, reading: TemperatureChanged) -> None:
        await asyncio.sleep(delay)
        temperature = convert(reading.celsius)
        target.print(
            f"[dim][{datetime.now():%H:%M:%S}][/dim] [cyan][{subscriber_id}][/cyan] "
            f"Responding to new temperature: {temperature:.1f}{units}"
        )

    subscriber.__qualname__ = f"subscriber_{subscriber_id}"
    return subscriber


def default_subscribers(
    *, delay: float = 0.5, output: Console | None = None
) -> list[AsyncEventHandler[TemperatureChanged]]:
    """Celsius, Fahrenheit and Kelvin subscribers."""
    return [
        create_subscriber(0, lambda celsius: celsius, "°C", delay=delay, output=output),
        create_subscriber(1, lambda celsius: celsius * 9 / 5 + 32, "°F", delay=delay, output=output),
        create_subscriber(2, lambda celsius: celsius + 273.15, "K", delay=delay, output=output),
    ]
