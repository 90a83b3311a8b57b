"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP


def _format_interfaces(interfaces: Sequence[str] | str | None) -> str:
    """Return interface names as a JSON array literal for prompt display."""
    if interfaces is None:
        return "all"
    if isinstance(interfaces, str):
        items = [s.strip() for s in interfaces.split(",") if s.strip()]
    else:
        items = [str(s).strip() for s in interfaces if str(s).strip()]
    if not items:
        return "all"
    quoted = ", ".join(f'"{item}"' for item in items)
    return f"[{quoted}]"


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def summarize_interface_traffic(
        log_path: str,
        interfaces: Sequence[str] | str | None = None,
        label: str = "earlier",
    ) -> list[dict[str, Any]]:
        """Build a prompt that summarizes per-interface traffic from a netstats log."""
        return [
            {
                "role": "system",
                "content": (
                    "You analyze network interface traffic. Use the netstats_deltas tool to get "
                    "per-interface byte increments, then summarize peak intervals, idle periods "
                    "and any intervals flagged as counter resets. Never invent numbers that are "
                    "not in the tool output."
                ),
            },
            {
                "role": "user",
                "content": (
                    f"Summarize traffic in {log_path}.\n"
                    f"- interfaces: {_format_interfaces(interfaces)}\n"
                    f"- label: {label}\n"
                    "Call netstats_deltas with these arguments first."
                ),
            },
        ]
