from __future__ import annotations

from notification_hub.application.ports.listener_port import HubPort
from notification_hub.domain.entities.weather_reading import WeatherReading
from notification_hub.domain.value_objects.handle import Handle


class Display:
    """Weather display that keeps its own registration handle.

    Subclasses implement ``__call__`` (the listener) and ``render``.
    """

    def __init__(self) -> None:
        self._handle: Handle | None = None

    @property
    def handle(self) -> Handle | None:
        return self._handle

    def subscribe(self, hub: HubPort[WeatherReading]) -> Handle:
        if self._handle is None:
            self._handle = hub.attach(self)
        return self._handle

    def unsubscribe(self, hub: HubPort[WeatherReading]) -> None:
        if self._handle is not None:
            hub.detach(self._handle)
            self._handle = None

    def __call__(self, reading: WeatherReading) -> None:
        raise NotImplementedError

    def render(self) -> str:
        raise NotImplementedError
