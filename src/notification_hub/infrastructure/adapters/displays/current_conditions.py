from __future__ import annotations

from notification_hub.domain.entities.weather_reading import WeatherReading
from notification_hub.infrastructure.adapters.displays.base import Display


class CurrentConditionsDisplay(Display):
    def __init__(self) -> None:
        super().__init__()
        self.reading: WeatherReading | None = None

    def __call__(self, reading: WeatherReading) -> None:
        self.reading = reading

    def render(self) -> str:
        if self.reading is None:
            return "No current conditions yet"
        return f"Current conditions: {self.reading.temperature:.1f}C and {self.reading.humidity:.1f}% humidity"
