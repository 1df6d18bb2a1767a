from typing import Protocol

from notification_hub.domain.entities.delivery_report import DeliveryReport


class HubMetricsPort(Protocol):
    def record(self, report: DeliveryReport) -> None:
        """Count a completed fan-out."""
        ...

    def record_aborted(self) -> None:
        """Count a fan-out cut short by a listener exception."""
        ...
