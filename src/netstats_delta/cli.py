from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import replace

from netstats_delta.core.config import parse_label, parse_order, resolve_analysis_config
from netstats_delta.core.errors import IngestError
from netstats_delta.core.models import DeltaLabel, InterfaceOrder
from netstats_delta.core.netstats_service import analyze_file
from netstats_delta.core.report import build_report, render_text


def _order_arg(s: str) -> InterfaceOrder:
    try:
        return parse_order(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _label_arg(s: str) -> DeltaLabel:
    try:
        return parse_label(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="netstats-delta",
        description="Per-interface RX/TX byte increments from a netstats log.",
        epilog="Output will be printed to stdout.",
    )
    p.add_argument("-i", "--in", dest="infile", default=None, metavar="NAME", help="input filename")
    p.add_argument("--format", choices=["text", "json"], default="text")
    p.add_argument(
        "--order",
        type=_order_arg,
        default=None,
        help="Interface order: lexicographic (default) or first_seen",
    )
    p.add_argument(
        "--label",
        type=_label_arg,
        default=None,
        help="Timestamp of each delta: earlier (default) or later sample",
    )
    p.add_argument(
        "--validate-order",
        action="store_true",
        help="Warn about samples whose timestamp goes backwards",
    )
    return p


def _configure_logging() -> None:
    level_name = os.getenv("NETSTATS_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)

    if not args.infile:
        p.print_help()
        return 0

    _configure_logging()

    try:
        cfg = resolve_analysis_config(None)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if args.order is not None:
        cfg = replace(cfg, order=args.order)
    if args.label is not None:
        cfg = replace(cfg, label=args.label)
    if args.validate_order:
        cfg = replace(cfg, validate_order=True)

    print(f"Processing file '{args.infile}'.", file=sys.stderr)
    try:
        analysis = asyncio.run(analyze_file(args.infile, config=cfg))
    except OSError:
        print(f"Error opening input file: {args.infile}", file=sys.stderr)
        print("Processing failed.", file=sys.stderr)
        return 1
    except IngestError as e:
        print(str(e), file=sys.stderr)
        print("Processing failed.", file=sys.stderr)
        return 1

    report = build_report(analysis)
    if args.format == "json":
        print(json.dumps(report.model_dump(mode="json"), indent=2))
    else:
        print(render_text(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
