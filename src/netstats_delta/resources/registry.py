"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from netstats_delta.core.report import DeltaReport

ALLOWED_FILE_SUFFIXES = {".log", ".txt"}
BASE_DIR_ENV = "NETSTATS_BASE_DIR"
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "replace"

SAMPLE_LOG = (
    "Tue, 14 Oct 2014 10:00:00 +0000 @ eth0 RX 100 TX 50, lo RX 10 TX 10,\n"
    "Tue, 14 Oct 2014 10:05:00 +0000 @ eth0 RX 150 TX 80, lo RX 20 TX 20, wlan0 RX 5 TX 1,\n"
    "Tue, 14 Oct 2014 10:10:00 +0000 @ eth0 RX 300 TX 80, lo RX 30 TX 30,\n"
    "Tue, 14 Oct 2014 10:15:00 +0000 @ eth0 RX 40 TX 10, lo RX 40 TX 40, wlan0 RX 9 TX 3,\n"
)


def _base_dir() -> Path:
    """Return the resolved base directory for file resources."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = _base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def _resolve_resource_path(path: str) -> Path:
    """Resolve and validate a resource file path."""
    resolved = safe_resolve(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"File not found: {resolved}")
    if resolved.suffix.lower() not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://netstats/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        return (
            "Resources:\n"
            "- app://netstats/help\n"
            "- app://netstats/examples/sample-log\n"
            "- app://netstats/schemas/delta-report\n"
            f"- log://{{path}} (restricted to {BASE_DIR_ENV}; allowed: {allowed})\n"
            f"\nBase directory: {_base_dir()}\n"
        )

    @mcp.resource("app://netstats/examples/sample-log")
    def sample_log() -> str:
        """Return a tiny netstats log for demos and tests."""
        return SAMPLE_LOG

    @mcp.resource("app://netstats/schemas/delta-report")
    def delta_report_schema() -> dict[str, Any]:
        """Return the JSON schema of the netstats_deltas tool output."""
        return DeltaReport.model_json_schema()

    @mcp.resource("log://{path}")
    async def read_log(path: str) -> str:
        """Return raw log contents from within NETSTATS_BASE_DIR."""
        p = _resolve_resource_path(path)
        return await asyncio.to_thread(p.read_text, encoding=TEXT_ENCODING, errors=TEXT_ERRORS)
