"""Development entrypoint for the questcalc console."""

from __future__ import annotations

import sys

from questcalc.main import main

if __name__ == "__main__":
    sys.exit(main())
