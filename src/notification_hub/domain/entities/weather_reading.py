import math
from dataclasses import dataclass

from notification_hub.domain.errors import InvalidReadingError


@dataclass(frozen=True)
class WeatherReading:
    """One measurement set from a weather station (temperature in C, humidity in %)."""

    temperature: float
    humidity: float
    pressure: float

    def __post_init__(self) -> None:
        for name in ("temperature", "humidity", "pressure"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidReadingError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidReadingError(f"{name} must be finite, got {value!r}")
        if not 0.0 <= self.humidity <= 100.0:
            raise InvalidReadingError(f"humidity must be within 0..100, got {self.humidity!r}")
        if self.pressure <= 0:
            raise InvalidReadingError(f"pressure must be positive, got {self.pressure!r}")
