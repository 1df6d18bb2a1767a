from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from notification_hub.domain.entities.delivery_report import DeliveryReport
from notification_hub.domain.hub import NotificationHub
from notification_hub.domain.value_objects.handle import Handle

T = TypeVar("T")


class Signal(Generic[T]):
    """Signal/slot naming over a :class:`NotificationHub`."""

    def __init__(self, hub: NotificationHub[T] | None = None, **hub_options: Any) -> None:
        self._hub: NotificationHub[T] = hub if hub is not None else NotificationHub(**hub_options)

    @property
    def hub(self) -> NotificationHub[T]:
        return self._hub

    def connect(self, slot: Callable[[T], None]) -> Handle:
        return self._hub.attach(slot)

    def disconnect(self, target: Handle | Callable[[T], None]) -> bool:
        if isinstance(target, Handle):
            return self._hub.detach(target)
        return self._hub.detach_listener(target)

    def emit(self, payload: T) -> DeliveryReport:
        return self._hub.notify(payload)

    def __len__(self) -> int:
        return len(self._hub)
