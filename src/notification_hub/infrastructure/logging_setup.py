from __future__ import annotations

import logging

_HANDLER_NAME = "notification_hub.console"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Install one console handler on the root logger. Safe to call repeatedly."""
    root = logging.getLogger()
    root.setLevel(level if isinstance(level, int) else level.upper())
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(handler)
    return root
