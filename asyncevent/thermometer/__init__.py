"""Sample publisher: a simulated thermometer and unit-converting subscribers."""

from .sensor import TemperatureChanged, Thermometer
from .subscribers import create_subscriber, default_subscribers

__all__ = [
    "TemperatureChanged",
    "Thermometer",
    "create_subscriber",
    "default_subscribers",
]
