"""Per-interface observation series."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Observation, Sample


def build_series(ifname: str, samples: Iterable[Sample]) -> list[Observation]:
    """Project samples onto one interface, skipping samples where it is absent."""
    out: list[Observation] = []
    for sample in samples:
        counters = sample.interfaces.get(ifname)
        if counters is None:
            continue
        out.append(Observation(timestamp=sample.timestamp, rx=counters.rx, tx=counters.tx))
    return out
