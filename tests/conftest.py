from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_netstats_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text(
            "\n".join(
                [
                    "Tue, 14 Oct 2014 10:00:00 +0000 @ eth0 RX 100 TX 50, lo RX 10 TX 10,",
                    "Tue, 14 Oct 2014 10:05:00 +0000 @ eth0 RX 150 TX 80, lo RX 20 TX 20, eth1 RX 7 TX 3,",
                    "Tue, 14 Oct 2014 10:10:00 +0000 @ eth0 RX 300 TX 80, lo RX 30 TX 30,",
                    "Tue, 14 Oct 2014 10:15:00 +0000 @ eth0 RX 40 TX 10, lo RX 40 TX 40, eth1 RX 9 TX 4,",
                ]
            )
            + "\n",
            encoding="utf-8",
        )

    return _write


@pytest.fixture
def write_lines() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")

    return _write
