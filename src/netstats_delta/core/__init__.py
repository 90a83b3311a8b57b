"""Netstats delta core: parsing, sample store and per-interface delta analysis."""

from __future__ import annotations

from .config import AnalysisConfig, resolve_analysis_config
from .deltas import compute_deltas
from .errors import IngestError, ParseError, ParseErrorKind
from .indexer import discover_interfaces
from .models import (
    CounterDelta,
    DeltaEntry,
    DeltaLabel,
    InterfaceCounters,
    InterfaceDeltas,
    InterfaceOrder,
    NetstatsAnalysis,
    Observation,
    Sample,
)
from .netstats_service import analyze_file, analyze_samples, ingest_lines, load_samples
from .parser import NetstatsLineParser, ParsedRecord
from .series import build_series
from .store import SampleStore

__all__ = [
    "AnalysisConfig",
    "CounterDelta",
    "DeltaEntry",
    "DeltaLabel",
    "IngestError",
    "InterfaceCounters",
    "InterfaceDeltas",
    "InterfaceOrder",
    "NetstatsAnalysis",
    "NetstatsLineParser",
    "Observation",
    "ParseError",
    "ParseErrorKind",
    "ParsedRecord",
    "Sample",
    "SampleStore",
    "analyze_file",
    "analyze_samples",
    "build_series",
    "compute_deltas",
    "discover_interfaces",
    "ingest_lines",
    "load_samples",
    "resolve_analysis_config",
]
