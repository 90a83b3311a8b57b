"""Analysis configuration and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from .models import DeltaLabel, InterfaceOrder

ORDER_ENV = "NETSTATS_INTERFACE_ORDER"
LABEL_ENV = "NETSTATS_DELTA_LABEL"


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    order: InterfaceOrder = InterfaceOrder.LEXICOGRAPHIC
    label: DeltaLabel = DeltaLabel.EARLIER
    validate_order: bool = False
    encoding: str = "utf-8"
    decode_errors: str = "replace"


def parse_order(value: str) -> InterfaceOrder:
    """Parse an interface order name (case-insensitive)."""
    try:
        return InterfaceOrder(value.strip().lower())
    except ValueError as exc:
        valid = ", ".join(o.value for o in InterfaceOrder)
        raise ValueError(f"Unknown interface order '{value}'. Valid values: {valid}.") from exc


def parse_label(value: str) -> DeltaLabel:
    """Parse a delta label name (case-insensitive)."""
    try:
        return DeltaLabel(value.strip().lower())
    except ValueError as exc:
        valid = ", ".join(lbl.value for lbl in DeltaLabel)
        raise ValueError(f"Unknown delta label '{value}'. Valid values: {valid}.") from exc


def resolve_analysis_config(cfg: AnalysisConfig | None) -> AnalysisConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = AnalysisConfig()

    order_env = os.getenv(ORDER_ENV)
    if order_env:
        try:
            cfg = replace(cfg, order=parse_order(order_env))
        except ValueError as exc:
            raise ValueError(f"{ORDER_ENV}: {exc}") from exc

    label_env = os.getenv(LABEL_ENV)
    if label_env:
        try:
            cfg = replace(cfg, label=parse_label(label_env))
        except ValueError as exc:
            raise ValueError(f"{LABEL_ENV}: {exc}") from exc

    return cfg
