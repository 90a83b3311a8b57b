"""Append-only sample store (build, then freeze)."""

from __future__ import annotations

import logging

from .models import Sample

logger = logging.getLogger(__name__)


class SampleStore:
    """Holds parsed samples in file order.

    Written by a single ingestion pass, then frozen; analysis only reads the
    frozen tuple returned by :meth:`all_samples`.
    """

    def __init__(self, *, validate_order: bool = False) -> None:
        self._samples: list[Sample] = []
        self._frozen = False
        self._validate_order = validate_order
        self._order_violations: list[int] = []

    def append(self, sample: Sample) -> None:
        if self._frozen:
            raise RuntimeError("SampleStore is frozen; no further samples can be appended")

        if self._validate_order and self._samples:
            prev = self._samples[-1]
            if sample.timestamp < prev.timestamp:
                logger.warning(
                    "Sample at line %d (%s) is earlier than line %d (%s)",
                    sample.line_no,
                    sample.timestamp.isoformat(),
                    prev.line_no,
                    prev.timestamp.isoformat(),
                )
                self._order_violations.append(sample.line_no)

        self._samples.append(sample)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def order_violations(self) -> tuple[int, ...]:
        """Line numbers of samples that went back in time."""
        return tuple(self._order_violations)

    def all_samples(self) -> tuple[Sample, ...]:
        return tuple(self._samples)

    def __len__(self) -> int:
        return len(self._samples)
