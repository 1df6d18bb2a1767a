from __future__ import annotations
from typing import Any

class Recorder:
    """Collects (name, payload) pairs from several listeners in call order."""
    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
    def listener(self, name: str):
        def _listen(payload: Any) -> None:
            self.calls.append((name, payload))
        _listen.__name__ = name
        return _listen

class Boom(Exception):
    pass

def failing(recorder: Recorder, name: str, error: Exception | None = None):
    err = error or Boom(name)
    def _listen(payload: Any) -> None:
        recorder.calls.append((name, payload))
        raise err
    return _listen, err

class FakeMetrics:
    def __init__(self) -> None:
        self.reports: list = []
        self.aborted = 0
    def record(self, report) -> None:
        self.reports.append(report)
    def record_aborted(self) -> None:
        self.aborted += 1
