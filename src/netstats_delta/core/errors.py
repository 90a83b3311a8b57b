"""Parse and ingestion errors."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Per-line failure conditions reported by the record parser."""

    DATE_NOT_FOUND = "DateNotFound"
    NO_INTERFACE_DATA = "NoInterfaceData"
    MALFORMED_COUNTER = "MalformedCounter"


_DESCRIPTIONS = {
    ParseErrorKind.DATE_NOT_FOUND: "can't locate date",
    ParseErrorKind.NO_INTERFACE_DATA: "can't locate interface data",
    ParseErrorKind.MALFORMED_COUNTER: "malformed counter",
}


class ParseError(ValueError):
    """Raised when a single line can't be turned into a record."""

    def __init__(self, kind: ParseErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        msg = _DESCRIPTIONS[kind]
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class IngestError(ValueError):
    """Fatal ingestion failure, tied to the offending line number."""

    def __init__(self, line_no: int, error: ParseError) -> None:
        self.line_no = line_no
        self.kind = error.kind
        super().__init__(f"Syntax error in log file at line {line_no}: {error}")
