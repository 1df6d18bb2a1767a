from __future__ import annotations

from notification_hub.domain.entities.weather_reading import WeatherReading
from notification_hub.infrastructure.adapters.displays.base import Display


class StatisticsDisplay(Display):
    """Running min/avg/max of temperature."""

    def __init__(self) -> None:
        super().__init__()
        self.count = 0
        self._total = 0.0
        self.min_temp: float | None = None
        self.max_temp: float | None = None

    def __call__(self, reading: WeatherReading) -> None:
        temp = float(reading.temperature)
        self.count += 1
        self._total += temp
        self.min_temp = temp if self.min_temp is None else min(self.min_temp, temp)
        self.max_temp = temp if self.max_temp is None else max(self.max_temp, temp)

    @property
    def avg_temp(self) -> float | None:
        return self._total / self.count if self.count else None

    def render(self) -> str:
        if not self.count:
            return "No temperature data yet"
        return f"Avg/Max/Min temperature = {self.avg_temp:.1f}/{self.max_temp:.1f}/{self.min_temp:.1f}"
