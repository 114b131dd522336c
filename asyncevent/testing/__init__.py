"""Testing utilities for asyncevent."""

from .factory import TemperatureChangedFactory
from .fixtures import async_event, thermometer_config
from .gates import CallRecorder, HandlerGate, RecordedCall

__all__ = [
    "CallRecorder",
    "HandlerGate",
    "RecordedCall",
    "TemperatureChangedFactory",
    "async_event",
    "thermometer_config",
]
