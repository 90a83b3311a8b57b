"""Core data models for netstats delta analysis."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType

U64_MAX = 2**64 - 1


class InterfaceOrder(str, Enum):
    """Deterministic output order for interface names."""

    LEXICOGRAPHIC = "lexicographic"
    FIRST_SEEN = "first_seen"


class DeltaLabel(str, Enum):
    """Which observation's timestamp labels a delta entry."""

    EARLIER = "earlier"
    LATER = "later"


@dataclass(frozen=True, slots=True)
class InterfaceCounters:
    """Cumulative RX/TX byte counters of one interface at one sample."""

    rx: int
    tx: int


@dataclass(frozen=True, slots=True)
class Sample:
    """One log line's timestamp and interface snapshot."""

    timestamp: datetime
    interfaces: Mapping[str, InterfaceCounters]
    line_no: int = 0

    def __post_init__(self) -> None:
        # Freeze the mapping so callers can't mutate a stored sample.
        object.__setattr__(self, "interfaces", MappingProxyType(dict(self.interfaces)))


@dataclass(frozen=True, slots=True)
class Observation:
    """One interface's cumulative counters at one sample's timestamp."""

    timestamp: datetime
    rx: int
    tx: int


@dataclass(frozen=True, slots=True)
class CounterDelta:
    """Increment between two consecutive observations (interface-agnostic)."""

    timestamp: datetime
    rx: int
    tx: int
    rx_reset: bool = False
    tx_reset: bool = False

    @property
    def reset(self) -> bool:
        return self.rx_reset or self.tx_reset


@dataclass(frozen=True, slots=True)
class DeltaEntry:
    """Delta entry handed to reporters."""

    ifname: str
    timestamp: datetime
    rx: int
    tx: int
    reset: bool
    rx_reset: bool = False
    tx_reset: bool = False


@dataclass(frozen=True, slots=True)
class InterfaceDeltas:
    """Per-interface delta table."""

    ifname: str
    observations: int
    entries: tuple[DeltaEntry, ...]


@dataclass(frozen=True, slots=True)
class NetstatsAnalysis:
    """Result of one analysis run."""

    interfaces: tuple[InterfaceDeltas, ...]
    sample_count: int
    order: InterfaceOrder
    label: DeltaLabel
    order_violations: tuple[int, ...] = field(default_factory=tuple)

    def for_interface(self, ifname: str) -> InterfaceDeltas | None:
        for table in self.interfaces:
            if table.ifname == ifname:
                return table
        return None
