"""Log loading and per-interface delta analysis.

This module is the main integration point: it reads a netstats log, builds the
sample store and turns it into per-interface delta tables.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import aiofiles

from .config import AnalysisConfig
from .deltas import compute_deltas
from .errors import IngestError, ParseError
from .indexer import discover_interfaces
from .models import DeltaEntry, InterfaceCounters, InterfaceDeltas, NetstatsAnalysis, Sample
from .parser import NetstatsLineParser, ParsedRecord
from .series import build_series
from .store import SampleStore

logger = logging.getLogger(__name__)


def record_to_sample(record: ParsedRecord, *, line_no: int) -> Sample:
    """Convert a parsed record into a Sample (last duplicate name wins)."""
    interfaces: dict[str, InterfaceCounters] = {}
    for rec in record.interfaces:
        if rec.ifname in interfaces:
            logger.warning("Interface %s listed twice on line %d; keeping last", rec.ifname, line_no)
        interfaces[rec.ifname] = InterfaceCounters(rx=rec.rx, tx=rec.tx)
    return Sample(timestamp=record.timestamp, interfaces=interfaces, line_no=line_no)


def ingest_lines(
    lines: Iterable[str],
    *,
    parser: NetstatsLineParser | None = None,
    validate_order: bool = False,
) -> SampleStore:
    """Build a frozen store from in-memory lines (numbered from 1)."""
    parser = parser or NetstatsLineParser()
    store = SampleStore(validate_order=validate_order)
    for line_no, line in enumerate(lines, start=1):
        _ingest_line(store, parser, line_no, line)
    store.freeze()
    return store


def _ingest_line(store: SampleStore, parser: NetstatsLineParser, line_no: int, line: str) -> None:
    line = line.strip()
    if not line:
        return
    try:
        record = parser.parse(line)
    except ParseError as exc:
        raise IngestError(line_no, exc) from exc
    store.append(record_to_sample(record, line_no=line_no))


async def load_samples(
    log_path: str | Path,
    *,
    config: AnalysisConfig | None = None,
    parser: NetstatsLineParser | None = None,
) -> SampleStore:
    """Read a netstats log into a frozen SampleStore.

    Aborts with IngestError on the first line without a date or interface
    data; no store is returned in that case.
    """
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    config = config or AnalysisConfig()
    parser = parser or NetstatsLineParser()
    store = SampleStore(validate_order=config.validate_order)

    async with aiofiles.open(path, encoding=config.encoding, errors=config.decode_errors) as f:
        line_no = 0
        async for line in f:
            line_no += 1
            _ingest_line(store, parser, line_no, line)

    store.freeze()
    logger.debug("Loaded %d samples from %s (%d lines)", len(store), path, line_no)
    return store


def analyze_samples(
    samples: Iterable[Sample],
    *,
    config: AnalysisConfig | None = None,
    order_violations: Iterable[int] = (),
) -> NetstatsAnalysis:
    """Compute per-interface delta tables for an ordered sample sequence."""
    config = config or AnalysisConfig()
    samples = tuple(samples)

    tables: list[InterfaceDeltas] = []
    for ifname in discover_interfaces(samples, order=config.order):
        series = build_series(ifname, samples)
        entries = tuple(
            DeltaEntry(
                ifname=ifname,
                timestamp=d.timestamp,
                rx=d.rx,
                tx=d.tx,
                reset=d.reset,
                rx_reset=d.rx_reset,
                tx_reset=d.tx_reset,
            )
            for d in compute_deltas(series, label=config.label)
        )
        tables.append(InterfaceDeltas(ifname=ifname, observations=len(series), entries=entries))

    return NetstatsAnalysis(
        interfaces=tuple(tables),
        sample_count=len(samples),
        order=config.order,
        label=config.label,
        order_violations=tuple(order_violations),
    )


async def analyze_file(
    log_path: str | Path,
    *,
    config: AnalysisConfig | None = None,
    parser: NetstatsLineParser | None = None,
) -> NetstatsAnalysis:
    """Load a log file and return its per-interface delta tables."""
    config = config or AnalysisConfig()
    store = await load_samples(log_path, config=config, parser=parser)
    return analyze_samples(
        store.all_samples(),
        config=config,
        order_violations=store.order_violations,
    )
