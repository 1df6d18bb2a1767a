from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter

from notification_hub.application.ports.metrics_port import HubMetricsPort
from notification_hub.domain.entities.delivery_report import DeliveryReport


class PrometheusHubMetrics(HubMetricsPort):
    """Fan-out counters exported through prometheus_client."""

    def __init__(self, registry: CollectorRegistry | None = None, hub: str = "weather") -> None:
        self.registry = registry or CollectorRegistry()
        self.hub = hub
        self.notifications = Counter(
            "notification_hub_notifications",
            "Fan-outs started, by outcome",
            ["hub", "outcome"],
            registry=self.registry,
        )
        self.deliveries = Counter(
            "notification_hub_deliveries",
            "Listener invocations that returned normally",
            ["hub"],
            registry=self.registry,
        )
        self.failures = Counter(
            "notification_hub_listener_failures",
            "Listener invocations that raised",
            ["hub"],
            registry=self.registry,
        )

    def record(self, report: DeliveryReport) -> None:
        outcome = "ok" if report.ok else "failed"
        self.notifications.labels(hub=self.hub, outcome=outcome).inc()
        self.deliveries.labels(hub=self.hub).inc(report.delivered)
        self.failures.labels(hub=self.hub).inc(len(report.failures))

    def record_aborted(self) -> None:
        self.notifications.labels(hub=self.hub, outcome="aborted").inc()
        self.failures.labels(hub=self.hub).inc()
