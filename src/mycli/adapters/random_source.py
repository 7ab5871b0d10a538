"""Random source adapters implementing :class:`RandomSourcePort`."""

from __future__ import annotations

import random
from collections.abc import Iterable

from mycli.application.ports.random import RandomSourcePort


class SystemRandomSource(RandomSourcePort):
    """Draw floats from a private :class:`random.Random` instance.

    Examples
    --------
    >>> first = SystemRandomSource(seed=7).next_float()
    >>> first == SystemRandomSource(seed=7).next_float()
    True
    >>> 0.0 <= first < 1.0
    True
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def next_float(self) -> float:
        return self._random.random()


class ScriptedRandomSource(RandomSourcePort):
    """Replay a fixed sequence of draws, for deterministic fault injection.

    Examples
    --------
    >>> source = ScriptedRandomSource([0.05, 0.7])
    >>> source.next_float(), source.next_float()
    (0.05, 0.7)
    >>> source.remaining
    0
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values = [float(value) for value in values]
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"scripted draw {value!r} outside [0, 1)")
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def next_float(self) -> float:
        if self._position >= len(self._values):
            raise RuntimeError("scripted random source exhausted")
        value = self._values[self._position]
        self._position += 1
        return value


__all__ = ["ScriptedRandomSource", "SystemRandomSource"]
