from __future__ import annotations

from enum import Enum


class FailurePolicy(Enum):
    """What ``notify`` does when a listener raises."""

    ABORT = "abort"
    CONTINUE_AND_COLLECT = "continue-and-collect"

    @classmethod
    def parse(cls, value: "FailurePolicy | str") -> "FailurePolicy":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == normalized:
                return policy
        accepted = ", ".join(p.value for p in cls)
        raise ValueError(f"Unknown failure policy {value!r}; expected one of: {accepted}")
