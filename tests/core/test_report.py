from __future__ import annotations

from netstats_delta.core.netstats_service import analyze_samples, ingest_lines
from netstats_delta.core.report import DeltaReport, build_report, render_text


def _report() -> DeltaReport:
    store = ingest_lines(
        [
            "2025-01-01 10:00:00 @ eth0 RX 1000 TX 500, lo RX 1 TX 1,",
            "2025-01-01 10:05:00 @ eth0 RX 10 TX 5,",
        ]
    )
    return build_report(analyze_samples(store.all_samples()))


def test_build_report_shape() -> None:
    report = _report()

    assert report.sample_count == 2
    assert report.interface_order == "lexicographic"
    assert report.timestamp_label == "earlier"
    assert [t.ifname for t in report.interfaces] == ["eth0", "lo"]

    (row,) = report.interfaces[0].deltas
    assert (row.rx, row.tx, row.reset) == (10, 5, True)
    assert report.interfaces[1].observations == 1
    assert report.interfaces[1].deltas == []


def test_report_json_dump() -> None:
    out = _report().model_dump(mode="json")
    assert out["interfaces"][0]["deltas"][0]["timestamp"].startswith("2025-01-01T10:00:00")


def test_render_text_marks_resets() -> None:
    text = render_text(_report())

    assert "if: eth0 (2 samples)" in text
    assert "reset" in text
    assert "(no deltas)" in text
    assert text.endswith("Processed 2 samples, 2 interfaces.")
