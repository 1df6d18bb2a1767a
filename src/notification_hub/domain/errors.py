from __future__ import annotations

from collections.abc import Sequence


class NotificationHubError(Exception):
    """Base class for errors raised by the hub and its collaborators."""


class PayloadTypeError(NotificationHubError, TypeError):
    """Payload handed to ``notify`` does not match the hub's payload type."""

    def __init__(self, expected: type | tuple[type, ...], payload: object) -> None:
        names = (
            ", ".join(t.__name__ for t in expected)
            if isinstance(expected, tuple)
            else expected.__name__
        )
        super().__init__(f"Expected payload of type {names}, got {type(payload).__name__}: {payload!r}")
        self.expected = expected
        self.payload = payload


class InvalidReadingError(NotificationHubError, ValueError):
    """Weather measurement outside of its physical range."""


class ListenerFailureGroup(ExceptionGroup):
    """All listener exceptions collected during one ``notify`` call."""

    def derive(self, excs: Sequence[Exception]) -> "ListenerFailureGroup":
        return ListenerFailureGroup(self.message, excs)
