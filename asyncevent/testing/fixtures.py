"""Pytest fixtures for asyncevent."""

from __future__ import annotations

from typing import Any

import pytest

from ..config import ThermometerConfig
from ..domain.event import AsyncEvent


@pytest.fixture()
def async_event() -> AsyncEvent[Any]:
    return AsyncEvent("test")


@pytest.fixture()
def thermometer_config() -> ThermometerConfig:
    return ThermometerConfig(
        min_interval=0.0,
        max_interval=0.0,
        subscriber_delay=0.0,
        startup_delay=0.0,
        rng_seed=7,
    )

