from __future__ import annotations

from typing import Protocol, TypeVar

from notification_hub.domain.value_objects.handle import Handle

T_contra = TypeVar("T_contra", contravariant=True)


class Listener(Protocol[T_contra]):
    """Anything callable with a single payload argument."""

    def __call__(self, payload: T_contra) -> None: ...


class HubPort(Protocol[T_contra]):
    """Membership side of a hub, as seen by listeners that manage their own subscription."""

    def attach(self, listener: Listener[T_contra]) -> Handle: ...
    def detach(self, handle: Handle) -> bool: ...
