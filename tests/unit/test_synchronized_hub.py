from __future__ import annotations

import threading

from notification_hub.domain.value_objects.failure_policy import FailurePolicy
from notification_hub.infrastructure.adapters.synchronized_hub import SynchronizedHub
from tests.unit._fakes_listeners import Recorder


def test_behaves_like_plain_hub():
    rec = Recorder()
    hub: SynchronizedHub[int] = SynchronizedHub(policy=FailurePolicy.ABORT)
    a = hub.attach(rec.listener("A"))
    hub.attach(rec.listener("B"))
    hub.notify(5)
    hub.detach(a)
    hub.notify(7)
    assert rec.calls == [("A", 5), ("B", 5), ("B", 7)]


def test_listener_can_reenter_membership_from_another_thread():
    hub: SynchronizedHub[int] = SynchronizedHub()
    attached = threading.Event()

    def spawn_attacher(payload: int) -> None:
        # Blocks forever if notify held the lock while delivering.
        t = threading.Thread(target=lambda: (hub.attach(lambda p: None), attached.set()))
        t.start()
        t.join(timeout=5)

    hub.attach(spawn_attacher)
    hub.notify(1)
    assert attached.is_set()
    assert len(hub) == 2


def test_concurrent_attach_detach_keeps_consistent_count():
    hub: SynchronizedHub[int] = SynchronizedHub()

    def churn() -> None:
        for _ in range(200):
            h = hub.attach(lambda p: None)
            hub.notify(0)
            hub.detach(h)

    threads = [threading.Thread(target=churn) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(hub) == 0
