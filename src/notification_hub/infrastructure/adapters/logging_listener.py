from __future__ import annotations

import logging
from typing import Any


class LoggingListener:
    """Listener that writes every payload to a logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO, label: str = "notification") -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level
        self.label = label

    def __call__(self, payload: Any) -> None:
        self.logger.log(self.level, "[%s] %r", self.label, payload)
