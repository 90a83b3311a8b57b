"""Report models and plain-text rendering."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from .models import NetstatsAnalysis


class DeltaRow(BaseModel):
    timestamp: datetime = Field(description="Sample timestamp the increment is labelled with.")
    rx: int = Field(ge=0, description="Received bytes in the interval.")
    tx: int = Field(ge=0, description="Transmitted bytes in the interval.")
    reset: bool = Field(default=False, description="A counter went backwards in this interval.")


class InterfaceTable(BaseModel):
    ifname: str
    observations: int = Field(ge=0, description="Samples in which the interface appeared.")
    deltas: list[DeltaRow] = Field(default_factory=list)


class DeltaReport(BaseModel):
    sample_count: int = Field(ge=0)
    interface_order: str
    timestamp_label: str = Field(description="'earlier' or 'later' sample of each pair.")
    order_violations: list[int] = Field(
        default_factory=list, description="Line numbers whose timestamp went backwards."
    )
    interfaces: list[InterfaceTable] = Field(default_factory=list)


def build_report(analysis: NetstatsAnalysis) -> DeltaReport:
    """Convert an analysis result into the report model."""
    return DeltaReport(
        sample_count=analysis.sample_count,
        interface_order=analysis.order.value,
        timestamp_label=analysis.label.value,
        order_violations=list(analysis.order_violations),
        interfaces=[
            InterfaceTable(
                ifname=t.ifname,
                observations=t.observations,
                deltas=[
                    DeltaRow(timestamp=e.timestamp, rx=e.rx, tx=e.tx, reset=e.reset)
                    for e in t.entries
                ],
            )
            for t in analysis.interfaces
        ],
    )


def render_text(report: DeltaReport) -> str:
    """Render one fixed-width table per interface."""
    lines: list[str] = []
    for table in report.interfaces:
        lines.append(f"if: {table.ifname} ({table.observations} samples)")
        if not table.deltas:
            lines.append("  (no deltas)")
        for row in table.deltas:
            marker = " reset" if row.reset else ""
            lines.append(f"  {row.timestamp.isoformat()}  rx {row.rx:>14}  tx {row.tx:>14}{marker}")
        lines.append("")
    lines.append(f"Processed {report.sample_count} samples, {len(report.interfaces)} interfaces.")
    return "\n".join(lines)
