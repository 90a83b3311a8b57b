"""Module entrypoint.

Allows:
    python -m netstats_delta -i /var/log/netstats-history.log
"""

from __future__ import annotations

from netstats_delta.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
