from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

from notification_hub.domain.value_objects.failure_policy import FailurePolicy

# Load .env if present
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    failure_policy: FailurePolicy = FailurePolicy.ABORT
    isolate_payload: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            failure_policy=FailurePolicy.parse(env.get("NOTIFY_FAILURE_POLICY", "abort")),
            isolate_payload=env.get("NOTIFY_ISOLATE_PAYLOAD", "false").strip().lower() in _TRUTHY,
            log_level=env.get("LOG_LEVEL", "INFO").strip().upper(),
        )


settings = Settings.from_env()
