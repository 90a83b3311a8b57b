"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (compute per-interface deltas for a log file)
- Resources: addressable data blobs (help, sample log, report schema, raw logs)
- Prompts: reusable conversation templates that clients can invoke

Run locally (stdio):
    python -m netstats_delta.server.netstats_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from netstats_delta.prompts.registry import register_prompts
from netstats_delta.resources.registry import register_resources, safe_resolve
from netstats_delta.tools.deltas import netstats_deltas_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure logging to stderr; the MCP client owns stdout."""
    level_name = os.getenv("NETSTATS_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


mcp = FastMCP("netstats-delta", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
async def netstats_deltas(
    log_path: str,
    order: str | None = None,
    label: str | None = None,
    validate_order: bool = False,
    interfaces: list[str] | None = None,
) -> dict[str, Any]:
    """Return per-interface RX/TX byte increments for a netstats log.

    Parameters
    ----------
    log_path:
        Path to a local netstats log, relative to NETSTATS_BASE_DIR or absolute within it.
    order:
        Interface order: "lexicographic" (default) or "first_seen".
    label:
        Which sample of each consecutive pair labels the delta: "earlier" (default) or "later".
    validate_order:
        When true, report line numbers whose timestamp goes backwards.
    interfaces:
        Optional list of interface names to return.

    Returns
    -------
    dict:
        {"count": int, "sample_count": int, "interfaces": list[dict], ...}
    """
    path = safe_resolve(log_path)
    return await netstats_deltas_impl(
        log_path=str(path),
        order=order,
        label=label,
        validate_order=validate_order,
        interfaces=interfaces,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
