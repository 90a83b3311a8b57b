"""Delta engine: cumulative counters to per-interval increments.

Works on plain ``(timestamp, rx, tx)`` observations and knows nothing about
interface names or the log format.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from .models import CounterDelta, DeltaLabel, Observation


def counter_delta(prev: int, curr: int) -> tuple[int, bool]:
    """Return (delta, reset) for one counter.

    A decrease means the counter restarted from zero, so the new value is the
    traffic seen since the reset.
    """
    if curr < prev:
        return curr, True
    return curr - prev, False


def compute_deltas(
    observations: Sequence[Observation],
    *,
    label: DeltaLabel = DeltaLabel.EARLIER,
) -> list[CounterDelta]:
    """Return one delta per consecutive pair of observations (N-1 for N)."""
    out: list[CounterDelta] = []
    for prev, curr in pairwise(observations):
        rx, rx_reset = counter_delta(prev.rx, curr.rx)
        tx, tx_reset = counter_delta(prev.tx, curr.tx)
        ts = prev.timestamp if label is DeltaLabel.EARLIER else curr.timestamp
        out.append(CounterDelta(timestamp=ts, rx=rx, tx=tx, rx_reset=rx_reset, tx_reset=tx_reset))
    return out
