"""Interface discovery across samples."""

from __future__ import annotations

from collections.abc import Iterable

from .models import InterfaceOrder, Sample


def discover_interfaces(
    samples: Iterable[Sample],
    *,
    order: InterfaceOrder = InterfaceOrder.LEXICOGRAPHIC,
) -> list[str]:
    """Return distinct interface names in a deterministic order.

    FIRST_SEEN orders by the first sample mentioning a name; names first seen
    in the same sample are sorted lexicographically.
    """
    first_seen: dict[str, int] = {}
    for idx, sample in enumerate(samples):
        for ifname in sample.interfaces:
            first_seen.setdefault(ifname, idx)

    if order is InterfaceOrder.FIRST_SEEN:
        return sorted(first_seen, key=lambda name: (first_seen[name], name))
    return sorted(first_seen)
