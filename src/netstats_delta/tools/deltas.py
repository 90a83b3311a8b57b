"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from netstats_delta.core.config import parse_label, parse_order, resolve_analysis_config
from netstats_delta.core.netstats_service import analyze_file
from netstats_delta.core.report import build_report


async def netstats_deltas_impl(
    *,
    log_path: str,
    order: str | None = None,
    label: str | None = None,
    validate_order: bool = False,
    interfaces: list[str] | None = None,
) -> dict[str, Any]:
    """Implementation for the `netstats_deltas` MCP tool.

    Notes
    -----
    - order/label fall back to NETSTATS_INTERFACE_ORDER / NETSTATS_DELTA_LABEL,
      then to lexicographic / earlier.
    - interfaces, when given, restricts the returned tables; unknown names are
      reported under "missing_interfaces".
    """
    cfg = resolve_analysis_config(None)
    if order is not None:
        cfg = replace(cfg, order=parse_order(order))
    if label is not None:
        cfg = replace(cfg, label=parse_label(label))
    if validate_order:
        cfg = replace(cfg, validate_order=True)

    analysis = await analyze_file(log_path, config=cfg)
    report = build_report(analysis)
    out = report.model_dump(mode="json")

    if interfaces:
        wanted = set(interfaces)
        out["interfaces"] = [t for t in out["interfaces"] if t["ifname"] in wanted]
        found = {t["ifname"] for t in out["interfaces"]}
        missing = sorted(wanted - found)
        if missing:
            out["missing_interfaces"] = missing

    out["count"] = len(out["interfaces"])
    return out
