"""Port for the pseudo-random draws used by fault injection."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSourcePort(Protocol):
    """Produce floats in the half-open interval ``[0, 1)``."""

    def next_float(self) -> float: ...


__all__ = ["RandomSourcePort"]
