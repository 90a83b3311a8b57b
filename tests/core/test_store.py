from __future__ import annotations

from datetime import UTC, datetime

import pytest

from netstats_delta.core.models import InterfaceCounters, Sample
from netstats_delta.core.store import SampleStore


def _sample(minute: int, line_no: int) -> Sample:
    ts = datetime(2025, 1, 1, 10, minute, tzinfo=UTC)
    return Sample(timestamp=ts, interfaces={"eth0": InterfaceCounters(1, 1)}, line_no=line_no)


def test_append_keeps_arrival_order() -> None:
    store = SampleStore()
    samples = [_sample(5, 1), _sample(0, 2), _sample(5, 3)]
    for s in samples:
        store.append(s)
    assert store.all_samples() == tuple(samples)
    assert len(store) == 3


def test_frozen_store_rejects_append() -> None:
    store = SampleStore()
    store.append(_sample(0, 1))
    store.freeze()
    assert store.frozen
    with pytest.raises(RuntimeError):
        store.append(_sample(1, 2))


def test_order_validation_flags_without_reordering() -> None:
    store = SampleStore(validate_order=True)
    for s in [_sample(0, 1), _sample(10, 2), _sample(5, 3), _sample(5, 4)]:
        store.append(s)
    assert store.order_violations == (3,)
    assert [s.line_no for s in store.all_samples()] == [1, 2, 3, 4]


def test_sample_interfaces_are_read_only() -> None:
    sample = _sample(0, 1)
    with pytest.raises(TypeError):
        sample.interfaces["eth1"] = InterfaceCounters(0, 0)  # type: ignore[index]
