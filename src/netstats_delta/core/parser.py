"""Netstats log line parser.

The logger writes one line per sample:

    Tue, 14 Oct 2014 10:00:01 +0200 @ eth0 RX 1024 TX 512, wlan0 RX 10 TX 5,
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

from .errors import ParseError, ParseErrorKind
from .models import U64_MAX

logger = logging.getLogger(__name__)

DEFAULT_TIMESTAMP_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%d-%m-%Y %H:%M:%S",
    "%a %b %d %H:%M:%S %Y",
)


@dataclass(frozen=True, slots=True)
class InterfaceRecord:
    """One (ifname, rx, tx) tuple as found on the line."""

    ifname: str
    rx: int
    tx: int


@dataclass(frozen=True, slots=True)
class ParsedRecord:
    """Parser output for one line."""

    timestamp: datetime
    interfaces: tuple[InterfaceRecord, ...]
    # (ifname, field) pairs whose counter was replaced by 0
    malformed: tuple[tuple[str, str], ...] = field(default_factory=tuple)


def _normalize_ts(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC)


def parse_counter(token: str) -> int | None:
    """Parse an unsigned 64-bit decimal counter; None when malformed."""
    if not token.isascii() or not token.isdigit():
        return None
    value = int(token)
    if value > U64_MAX:
        return None
    return value


@dataclass(frozen=True, slots=True)
class NetstatsLineParser:
    """Parse '<date> @ <if> RX <n> TX <n>, ...' lines."""

    timestamp_formats: Sequence[str] = DEFAULT_TIMESTAMP_FORMATS

    _date_re = re.compile(r"^(?P<date>.*?)\s+@(?:\s+|$)(?P<rest>.*)$")
    # Anchored on the RX/TX keywords only; names may contain spaces and
    # counter tokens may be empty or garbled (they degrade to 0).
    _if_re = re.compile(r"^(?P<ifname>.+?)\s+RX(?:\s+(?P<rx>.*?))?\s+TX(?:\s+(?P<tx>.*))?$")

    def _parse_ts(self, ts_str: str) -> datetime | None:
        """Parse a date string (RFC 2822, ISO 8601 or configured formats)."""
        try:
            return _normalize_ts(parsedate_to_datetime(ts_str))
        except (TypeError, ValueError, IndexError):
            pass

        try:
            return _normalize_ts(datetime.fromisoformat(ts_str.replace("Z", "+00:00")))
        except ValueError:
            pass

        for fmt in self.timestamp_formats:
            try:
                return datetime.strptime(ts_str, fmt).replace(tzinfo=UTC)
            except ValueError:
                continue
        return None

    def parse(self, line: str) -> ParsedRecord:
        """Parse a trimmed line, raising ParseError on fatal conditions."""
        m = self._date_re.match(line)
        if not m or not m.group("date").strip():
            raise ParseError(ParseErrorKind.DATE_NOT_FOUND)

        date_str = m.group("date").strip()
        ts = self._parse_ts(date_str)
        if ts is None:
            raise ParseError(ParseErrorKind.DATE_NOT_FOUND, f"unrecognized date {date_str!r}")

        interfaces: list[InterfaceRecord] = []
        malformed: list[tuple[str, str]] = []
        for segment in m.group("rest").split(","):
            segment = segment.strip()
            if not segment:
                continue
            seg = self._if_re.match(segment)
            if not seg:
                logger.debug("Skipping unrecognized interface segment %r", segment)
                continue

            ifname = seg.group("ifname")
            counters: dict[str, int] = {}
            for name in ("rx", "tx"):
                token = (seg.group(name) or "").strip()
                value = parse_counter(token)
                if value is None:
                    logger.warning(
                        "Malformed %s counter %r for interface %s; using 0",
                        name.upper(),
                        token,
                        ifname,
                    )
                    malformed.append((ifname, name))
                    value = 0
                counters[name] = value
            interfaces.append(InterfaceRecord(ifname=ifname, rx=counters["rx"], tx=counters["tx"]))

        if not interfaces:
            raise ParseError(ParseErrorKind.NO_INTERFACE_DATA)

        return ParsedRecord(timestamp=ts, interfaces=tuple(interfaces), malformed=tuple(malformed))
