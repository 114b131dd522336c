"""Configuration models for the thermometer sample publisher."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass(slots=True)
class ThermometerConfig:
    """Settings for :class:`asyncevent.thermometer.Thermometer` and its demo."""

    sensor_name: str = "thermometer"
    initial_celsius: float = 20.0
    min_interval: float = 1.0
    max_interval: float = 3.0
    subscriber_delay: float = 0.5
    startup_delay: float = 2.0
    rng_seed: int | None = None
    log_level: LogLevel = "INFO"

    def validate(self) -> None:
        if self.min_interval < 0:
            raise ValueError("min_interval cannot be negative")
        if self.max_interval < self.min_interval:
            raise ValueError("max_interval must not be lower than min_interval")
        if self.subscriber_delay < 0:
            raise ValueError("subscriber_delay cannot be negative")
        if self.startup_delay < 0:
            raise ValueError("startup_delay cannot be negative")

    @classmethod
    def from_env(cls) -> "ThermometerConfig":
        """Create config from environment variables prefixed with ASYNCEVENT_."""
        prefix = "ASYNCEVENT_"
        defaults = cls()
        log_level = os.getenv(f"{prefix}LOG_LEVEL", defaults.log_level).upper()
        if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
            raise ValueError(f"Unsupported {prefix}LOG_LEVEL {log_level}")

        config = cls(
            sensor_name=os.getenv(f"{prefix}SENSOR_NAME", "") or defaults.sensor_name,
            initial_celsius=_float_env(f"{prefix}INITIAL_CELSIUS", defaults.initial_celsius),
            min_interval=_float_env(f"{prefix}MIN_INTERVAL", defaults.min_interval),
            max_interval=_float_env(f"{prefix}MAX_INTERVAL", defaults.max_interval),
            subscriber_delay=_float_env(f"{prefix}SUBSCRIBER_DELAY", defaults.subscriber_delay),
            startup_delay=_float_env(f"{prefix}STARTUP_DELAY", defaults.startup_delay),
            rng_seed=_int_env(f"{prefix}RNG_SEED"),
            log_level=log_level,  # type: ignore[arg-type]
        )
        config.validate()
        return config


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid number for {name}: {raw!r}") from exc


def _int_env(name: str) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer for {name}: {raw!r}") from exc
