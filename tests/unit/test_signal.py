from __future__ import annotations

import pytest

from notification_hub.domain.hub import NotificationHub
from notification_hub.domain.signal import Signal
from notification_hub.domain.value_objects.failure_policy import FailurePolicy
from tests.unit._fakes_listeners import Recorder, failing


def test_connect_emit_disconnect_by_handle_and_slot():
    rec = Recorder()
    sig: Signal[int] = Signal()
    a = rec.listener("A")
    b = rec.listener("B")
    handle = sig.connect(a)
    sig.connect(b)

    sig.emit(1)
    assert rec.calls == [("A", 1), ("B", 1)]

    assert sig.disconnect(handle) is True
    assert sig.disconnect(b) is True
    assert sig.disconnect(b) is False
    assert len(sig) == 0
    sig.emit(2)
    assert rec.calls == [("A", 1), ("B", 1)]


def test_bound_method_slot_can_be_disconnected_by_value():
    class Thermometer:
        def __init__(self) -> None:
            self.seen: list[float] = []

        def on_temperature(self, value: float) -> None:
            self.seen.append(value)

    thermo = Thermometer()
    sig: Signal[float] = Signal()
    sig.connect(thermo.on_temperature)
    sig.emit(21.5)
    assert sig.disconnect(thermo.on_temperature) is True
    sig.emit(22.0)
    assert thermo.seen == [21.5]


def test_signal_passes_options_to_its_hub():
    rec = Recorder()
    sig: Signal[str] = Signal(policy=FailurePolicy.CONTINUE_AND_COLLECT)
    bad, err = failing(rec, "A")
    sig.connect(bad)
    sig.connect(rec.listener("B"))

    report = sig.emit("ping")
    assert [f.error for f in report.failures] == [err]
    assert rec.calls == [("A", "ping"), ("B", "ping")]


def test_signal_over_existing_hub_shares_registrations():
    hub: NotificationHub[int] = NotificationHub(payload_type=int)
    sig: Signal[int] = Signal(hub)
    sig.connect(lambda v: None)
    assert sig.hub is hub
    assert len(hub) == 1
    with pytest.raises(TypeError):
        sig.emit("nope")  # type: ignore[arg-type]
