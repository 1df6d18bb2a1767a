from __future__ import annotations

import logging

from notification_hub.application.ports.metrics_port import HubMetricsPort
from notification_hub.domain.entities.delivery_report import DeliveryReport
from notification_hub.domain.entities.weather_reading import WeatherReading
from notification_hub.domain.hub import NotificationHub

logger = logging.getLogger(__name__)


class WeatherStation:
    """Publishes every new measurement set to the listeners on its hub."""

    def __init__(
        self,
        hub: NotificationHub[WeatherReading] | None = None,
        *,
        metrics: HubMetricsPort | None = None,
    ) -> None:
        self.hub = hub if hub is not None else NotificationHub(payload_type=WeatherReading, name="weather")
        self.metrics = metrics
        self.latest: WeatherReading | None = None

    def set_measurements(self, temperature: float, humidity: float, pressure: float) -> DeliveryReport:
        return self.publish(WeatherReading(temperature, humidity, pressure))

    def publish(self, reading: WeatherReading) -> DeliveryReport:
        self.hub.check_payload(reading)
        self.latest = reading
        logger.info("Publishing %s to %d listener(s)", reading, len(self.hub))
        try:
            report = self.hub.notify(reading)
        except Exception:
            if self.metrics:
                self.metrics.record_aborted()
            raise
        if self.metrics:
            self.metrics.record(report)
        return report
