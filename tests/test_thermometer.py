import asyncio
import io
import logging
from random import Random

import pytest
from rich.console import Console

from asyncevent import from_sync
from asyncevent.cli import monitor
from asyncevent.config import ThermometerConfig
from asyncevent.testing import CallRecorder, TemperatureChangedFactory
from asyncevent.thermometer import Thermometer, create_subscriber, default_subscribers


@pytest.mark.asyncio()
async def test_reading_without_subscribers_is_not_published(thermometer_config):
    thermometer = Thermometer(thermometer_config)
    await thermometer.publish_reading()
    assert thermometer.readings_published == 0
    assert thermometer.current_celsius != thermometer_config.initial_celsius


@pytest.mark.asyncio()
async def test_reading_waits_for_every_subscriber(thermometer_config):
    thermometer = Thermometer(thermometer_config)
    recorder = CallRecorder()
    thermometer.temperature_changed += recorder.delayed("slow", 0.05)
    thermometer.temperature_changed += from_sync(recorder.sync("fast"))

    await thermometer.publish_reading()

    assert sorted(recorder.finished()) == ["fast", "slow"]
    reading = recorder.calls[0].payload
    assert reading.sensor == thermometer_config.sensor_name
    assert reading.celsius == thermometer.current_celsius
    assert thermometer.readings_published == 1


@pytest.mark.asyncio()
async def test_subscriber_failure_is_logged(thermometer_config, caplog):
    thermometer = Thermometer(thermometer_config)
    recorder = CallRecorder()
    thermometer.temperature_changed += recorder.delayed("broken", error=ValueError("sensor offline"))
    thermometer.temperature_changed += recorder.delayed("ok")

    with caplog.at_level(logging.WARNING, logger="asyncevent.thermometer.sensor"):
        await thermometer.publish_reading()

    assert recorder.finished() == ["ok"]
    assert thermometer.readings_published == 1
    failures = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(failures) == 1
    assert isinstance(failures[0].exc_info[1], ValueError)


@pytest.mark.asyncio()
async def test_random_walk_moves_at_most_one_degree(thermometer_config):
    thermometer = Thermometer(thermometer_config, rng=Random(3))
    previous = thermometer.current_celsius
    for _ in range(20):
        await thermometer.publish_reading()
        assert abs(thermometer.current_celsius - previous) <= 1.0
        previous = thermometer.current_celsius


@pytest.mark.asyncio()
async def test_monitoring_publishes_until_stopped(thermometer_config):
    recorder = CallRecorder()
    async with Thermometer(thermometer_config) as thermometer:
        thermometer.temperature_changed += recorder.delayed("listener", 0.001)
        thermometer.start_monitoring()
        assert thermometer.is_monitoring
        with pytest.raises(RuntimeError):
            thermometer.start_monitoring()
        await asyncio.sleep(0.05)

    assert not thermometer.is_monitoring
    assert thermometer.readings_published >= 1
    assert len(recorder.started()) >= thermometer.readings_published
    await thermometer.stop()


def test_invalid_config_is_rejected():
    with pytest.raises(ValueError):
        Thermometer(ThermometerConfig(min_interval=2.0, max_interval=1.0))


@pytest.mark.asyncio()
async def test_subscriber_prints_converted_temperature():
    output = io.StringIO()
    console = Console(file=output, width=120)
    reading = TemperatureChangedFactory(rng=Random(1)).build(celsius=20.0)
    subscriber = create_subscriber(1, lambda celsius: celsius * 9 / 5 + 32, "°F", delay=0, output=console)

    await subscriber(None, reading)

    assert "[1] Responding to new temperature: 68.0°F" in output.getvalue()


@pytest.mark.asyncio()
async def test_default_subscribers_cover_three_units():
    output = io.StringIO()
    console = Console(file=output, width=120)
    reading = TemperatureChangedFactory().build(celsius=0.0)

    for subscriber in default_subscribers(delay=0, output=console):
        await subscriber(None, reading)

    text = output.getvalue()
    assert "0.0°C" in text
    assert "32.0°F" in text
    assert "273.1K" in text or "273.2K" in text


def test_factory_builds_distinct_sensors():
    readings = list(TemperatureChangedFactory(rng=Random(5)).batch(3))
    assert len({reading.sensor for reading in readings}) == 3
    assert all(-30.0 <= reading.celsius <= 45.0 for reading in readings)


@pytest.mark.asyncio()
async def test_cli_monitor_runs_for_duration(thermometer_config):
    thermometer_config.min_interval = 0.01
    thermometer_config.max_interval = 0.01
    published = await monitor(thermometer_config, duration=0.1)
    assert published >= 1
