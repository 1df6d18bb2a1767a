from __future__ import annotations

from dataclasses import dataclass

from prometheus_client import CollectorRegistry

from notification_hub.application.ports.metrics_port import HubMetricsPort
from notification_hub.application.use_cases.weather_station import WeatherStation
from notification_hub.config import settings
from notification_hub.domain.entities.weather_reading import WeatherReading
from notification_hub.domain.value_objects.failure_policy import FailurePolicy
from notification_hub.infrastructure.adapters.displays.base import Display
from notification_hub.infrastructure.adapters.displays.current_conditions import CurrentConditionsDisplay
from notification_hub.infrastructure.adapters.displays.forecast import ForecastDisplay
from notification_hub.infrastructure.adapters.displays.statistics import StatisticsDisplay
from notification_hub.infrastructure.adapters.metrics.prometheus_metrics import PrometheusHubMetrics
from notification_hub.infrastructure.adapters.synchronized_hub import SynchronizedHub

registry = CollectorRegistry()
hub_metrics = PrometheusHubMetrics(registry)


@dataclass
class WeatherApp:
    station: WeatherStation
    displays: list[Display]

    def render(self) -> list[str]:
        return [d.render() for d in self.displays]


def build_weather_app(
    policy: FailurePolicy | str | None = None,
    *,
    metrics: HubMetricsPort | None = None,
    isolate_payload: bool | None = None,
) -> WeatherApp:
    """Wire a station to the three lesson displays."""
    hub: SynchronizedHub[WeatherReading] = SynchronizedHub(
        policy=policy if policy is not None else settings.failure_policy,
        payload_type=WeatherReading,
        isolate_payload=settings.isolate_payload if isolate_payload is None else isolate_payload,
        name="weather",
    )
    station = WeatherStation(hub, metrics=metrics)
    displays: list[Display] = [CurrentConditionsDisplay(), StatisticsDisplay(), ForecastDisplay()]
    for display in displays:
        display.subscribe(hub)
    return WeatherApp(station=station, displays=displays)
