from __future__ import annotations

from notification_hub.domain.entities.weather_reading import WeatherReading
from notification_hub.infrastructure.adapters.displays.base import Display

# Standard sea-level pressure in inHg, used as the baseline before the first reading.
INITIAL_PRESSURE = 29.92


class ForecastDisplay(Display):
    def __init__(self, initial_pressure: float = INITIAL_PRESSURE) -> None:
        super().__init__()
        self.current_pressure = initial_pressure
        self.last_pressure = initial_pressure

    def __call__(self, reading: WeatherReading) -> None:
        self.last_pressure = self.current_pressure
        self.current_pressure = reading.pressure

    def render(self) -> str:
        if self.current_pressure > self.last_pressure:
            return "Forecast: Improving weather on the way!"
        if self.current_pressure == self.last_pressure:
            return "Forecast: More of the same"
        return "Forecast: Watch out for cooler, rainy weather"
