"""Command line helpers for asyncevent."""

from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import replace

from rich.console import Console
from rich.logging import RichHandler

from .config import ThermometerConfig
from .thermometer import Thermometer, default_subscribers

console = Console()


def run_thermometer() -> None:
    parser = argparse.ArgumentParser(description="Thermometer publishing to async subscribers")
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="Seconds to keep monitoring (default: until Ctrl-C)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for readings")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Override ASYNCEVENT_LOG_LEVEL",
    )
    args = parser.parse_args()

    config = ThermometerConfig.from_env()
    if args.seed is not None:
        config = replace(config, rng_seed=args.seed)
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    configure_logging(config.log_level)

    try:
        asyncio.run(monitor(config, duration=args.duration))
    except KeyboardInterrupt:
        console.print("[yellow]Stopped.[/yellow]")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


async def monitor(config: ThermometerConfig, *, duration: float | None = None) -> int:
    """Run the thermometer with the default subscribers; return readings published."""
    async with Thermometer(config) as thermometer:
        for subscriber in default_subscribers(delay=config.subscriber_delay, output=console):
            thermometer.temperature_changed += subscriber

        if duration is None:
            console.print("Press [bold]Ctrl-C[/bold] to stop the program.")
        await asyncio.sleep(config.startup_delay)
        thermometer.start_monitoring()
        if duration is None:
            await asyncio.Event().wait()
        else:
            await asyncio.sleep(duration)
        return thermometer.readings_published
