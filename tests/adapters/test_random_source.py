from __future__ import annotations

import pytest

from mycli.adapters.random_source import ScriptedRandomSource, SystemRandomSource


def test_system_random_source_is_reproducible_with_seed() -> None:
    first = SystemRandomSource(seed=42)
    second = SystemRandomSource(seed=42)
    assert [first.next_float() for _ in range(5)] == [second.next_float() for _ in range(5)]


def test_system_random_source_stays_in_unit_interval() -> None:
    source = SystemRandomSource(seed=1)
    assert all(0.0 <= source.next_float() < 1.0 for _ in range(200))


def test_scripted_random_source_replays_values_in_order() -> None:
    source = ScriptedRandomSource([0.05, 0.3, 0.9])
    assert [source.next_float() for _ in range(3)] == [0.05, 0.3, 0.9]
    assert source.remaining == 0


def test_scripted_random_source_raises_when_exhausted() -> None:
    source = ScriptedRandomSource([0.5])
    source.next_float()
    with pytest.raises(RuntimeError, match="exhausted"):
        source.next_float()


@pytest.mark.parametrize("value", [-0.1, 1.0, 1.5])
def test_scripted_random_source_rejects_values_outside_unit_interval(value: float) -> None:
    with pytest.raises(ValueError, match="outside"):
        ScriptedRandomSource([value])
