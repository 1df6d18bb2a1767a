from __future__ import annotations

from collections.abc import Callable
from threading import RLock
from typing import Any, TypeVar

from notification_hub.domain.hub import NotificationHub
from notification_hub.domain.value_objects.handle import Handle

T = TypeVar("T")


class SynchronizedHub(NotificationHub[T]):
    """NotificationHub safe to share between threads.

    Membership changes and the snapshot taken by ``notify`` happen under one
    re-entrant lock. Listeners run outside of it, so a listener may attach or
    detach (on this hub or another) without deadlocking.
    """

    def __init__(self, **hub_options: Any) -> None:
        super().__init__(**hub_options)
        self._lock = RLock()

    def attach(self, listener: Callable[[T], None]) -> Handle:
        with self._lock:
            return super().attach(listener)

    def detach(self, handle: Handle) -> bool:
        with self._lock:
            return super().detach(handle)

    def detach_listener(self, listener: Callable[[T], None]) -> bool:
        with self._lock:
            return super().detach_listener(listener)

    def clear(self) -> None:
        with self._lock:
            super().clear()

    def snapshot(self) -> tuple[tuple[Handle, Callable[[T], None]], ...]:
        with self._lock:
            return super().snapshot()

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()
