from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from notification_hub.domain.errors import ListenerFailureGroup
from notification_hub.domain.value_objects.handle import Handle


@dataclass(frozen=True)
class ListenerFailure:
    handle: Handle
    listener: Callable[[Any], None]
    error: Exception


@dataclass(frozen=True)
class DeliveryReport:
    """Outcome of one fan-out.

    ``attempted`` counts listeners in the snapshot that were invoked,
    ``delivered`` those that returned normally.
    """

    attempted: int
    delivered: int
    failures: tuple[ListenerFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures

    def raise_for_failures(self) -> None:
        if self.failures:
            raise ListenerFailureGroup(
                f"{len(self.failures)} listener(s) failed",
                [f.error for f in self.failures],
            )
