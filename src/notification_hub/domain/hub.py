"""Synchronous, ordered fan-out of a payload to registered listeners.

A :class:`NotificationHub` keeps its registrations in insertion order and
delivers each payload to a snapshot of them taken when ``notify`` starts, so
listeners attached or detached while a fan-out is running only affect later
calls. Listeners are plain callables; ``attach`` hands back a :class:`Handle`
that ``detach`` uses to remove that one registration.
"""

from __future__ import annotations

import copy
import itertools
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from notification_hub.domain.entities.delivery_report import DeliveryReport, ListenerFailure
from notification_hub.domain.errors import PayloadTypeError
from notification_hub.domain.value_objects.failure_policy import FailurePolicy
from notification_hub.domain.value_objects.handle import Handle

T = TypeVar("T")

logger = logging.getLogger(__name__)


class NotificationHub(Generic[T]):
    _hub_ids = itertools.count(1)

    def __init__(
        self,
        *,
        policy: FailurePolicy | str = FailurePolicy.ABORT,
        payload_type: type | tuple[type, ...] | None = None,
        isolate_payload: bool = False,
        name: str = "hub",
    ) -> None:
        self._policy = FailurePolicy.parse(policy)
        self._payload_type = payload_type
        self._isolate_payload = isolate_payload
        self.name = name
        self._hub_id = next(self._hub_ids)
        self._next_seq = 1
        self._listeners: dict[Handle, Callable[[T], None]] = {}

    @property
    def policy(self) -> FailurePolicy:
        return self._policy

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------
    def attach(self, listener: Callable[[T], None]) -> Handle:
        """Register ``listener`` at the end of the delivery order.

        The same callable may be attached more than once; it is then invoked
        once per attachment.
        """
        if not callable(listener):
            raise TypeError(f"Listener must be callable, got {type(listener).__name__}")
        handle = Handle(hub_id=self._hub_id, seq=self._next_seq)
        self._next_seq += 1
        self._listeners[handle] = listener
        logger.debug("%s: attached %r as %s", self.name, listener, handle)
        return handle

    def detach(self, handle: Handle) -> bool:
        """Remove the registration behind ``handle``. Unknown handles are ignored."""
        listener = self._listeners.pop(handle, None)
        if listener is None:
            return False
        logger.debug("%s: detached %s", self.name, handle)
        return True

    def detach_listener(self, listener: Callable[[T], None]) -> bool:
        """Remove the earliest registration of ``listener``, if any."""
        for handle, registered in list(self._listeners.items()):
            if registered == listener:
                return self.detach(handle)
        return False

    def clear(self) -> None:
        self._listeners.clear()

    def snapshot(self) -> tuple[tuple[Handle, Callable[[T], None]], ...]:
        return tuple(self._listeners.items())

    def handles(self) -> tuple[Handle, ...]:
        return tuple(handle for handle, _ in self.snapshot())

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, handle: object) -> bool:
        return handle in self._listeners

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------
    def notify(self, payload: T) -> DeliveryReport:
        """Deliver ``payload`` to every listener registered right now, in order.

        Under ``FailurePolicy.ABORT`` the first listener exception propagates
        and the remaining listeners are skipped. Under
        ``FailurePolicy.CONTINUE_AND_COLLECT`` every listener is attempted and
        the exceptions come back in ``DeliveryReport.failures``.
        """
        self.check_payload(payload)
        return self._deliver(self.snapshot(), payload)

    def check_payload(self, payload: object) -> None:
        """Raise PayloadTypeError if ``payload`` is not of the hub's payload type."""
        if self._payload_type is not None and not isinstance(payload, self._payload_type):
            raise PayloadTypeError(self._payload_type, payload)

    def _deliver(
        self, snapshot: tuple[tuple[Handle, Callable[[T], None]], ...], payload: T
    ) -> DeliveryReport:
        delivered = 0
        failures: list[ListenerFailure] = []
        # All copies exist before the first listener runs.
        values = [copy.deepcopy(payload) for _ in snapshot] if self._isolate_payload else [payload] * len(snapshot)
        for (handle, listener), value in zip(snapshot, values):
            if self._policy is FailurePolicy.ABORT:
                listener(value)
                delivered += 1
                continue
            try:
                listener(value)
            except Exception as exc:
                logger.warning("%s: listener %s failed: %s", self.name, handle, exc, exc_info=exc)
                failures.append(ListenerFailure(handle=handle, listener=listener, error=exc))
            else:
                delivered += 1
        return DeliveryReport(attempted=len(snapshot), delivered=delivered, failures=tuple(failures))
