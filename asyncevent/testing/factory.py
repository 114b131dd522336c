"""Factories for tests and prototyping."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timezone
from random import Random
from typing import Iterable

from faker import Faker

from ..thermometer.sensor import TemperatureChanged


@dataclass(slots=True)
class TemperatureChangedFactory:
    faker: Faker = field(default_factory=Faker)
    rng: Random = field(default_factory=Random)

    def build(self, celsius: float | None = None) -> TemperatureChanged:
        if celsius is None:
            celsius = round(self.rng.uniform(-30.0, 45.0), 1)
        return TemperatureChanged(
            celsius=celsius,
            sensor=f"{self.faker.word()}-{self.faker.unique.random_int(1, 9999)}",
            measured_at=self.faker.date_time_this_year(tzinfo=timezone.utc),
        )

    def batch(self, count: int) -> Iterable[TemperatureChanged]:
        for _ in range(count):
            yield self.build()
