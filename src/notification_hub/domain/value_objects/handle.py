from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Handle:
    """Opaque token identifying one registration on one hub."""

    hub_id: int
    seq: int

    def __str__(self) -> str:
        return f"hub{self.hub_id}:{self.seq}"
