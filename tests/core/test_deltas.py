from __future__ import annotations

from datetime import UTC, datetime

from netstats_delta.core.deltas import compute_deltas
from netstats_delta.core.models import CounterDelta, DeltaLabel, Observation


def _ts(minute: int) -> datetime:
    return datetime(2025, 1, 1, 10, minute, tzinfo=UTC)


def test_monotonic_counters() -> None:
    obs = [
        Observation(_ts(0), 100, 50),
        Observation(_ts(5), 150, 80),
        Observation(_ts(10), 300, 80),
    ]
    deltas = compute_deltas(obs)
    assert deltas == [
        CounterDelta(_ts(0), 50, 30),
        CounterDelta(_ts(5), 150, 0),
    ]
    assert not any(d.reset for d in deltas)


def test_reset_reports_new_value_and_flags() -> None:
    obs = [Observation(_ts(0), 1000, 500), Observation(_ts(5), 10, 5)]
    (d,) = compute_deltas(obs)
    assert (d.rx, d.tx, d.reset) == (10, 5, True)
    assert d.rx_reset and d.tx_reset


def test_reset_on_one_direction_only() -> None:
    obs = [Observation(_ts(0), 1000, 500), Observation(_ts(5), 10, 600)]
    (d,) = compute_deltas(obs)
    assert (d.rx, d.tx) == (10, 100)
    assert d.rx_reset and not d.tx_reset
    assert d.reset


def test_fewer_than_two_observations() -> None:
    assert compute_deltas([]) == []
    assert compute_deltas([Observation(_ts(0), 1, 1)]) == []


def test_length_is_n_minus_one() -> None:
    obs = [Observation(_ts(i), i * 10, i * 5) for i in range(7)]
    assert len(compute_deltas(obs)) == 6


def test_later_label() -> None:
    obs = [Observation(_ts(0), 100, 50), Observation(_ts(5), 150, 80)]
    (d,) = compute_deltas(obs, label=DeltaLabel.LATER)
    assert d.timestamp == _ts(5)


def test_input_not_mutated() -> None:
    obs = [Observation(_ts(0), 100, 50), Observation(_ts(5), 150, 80)]
    before = list(obs)
    compute_deltas(obs)
    assert obs == before
