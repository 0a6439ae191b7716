#!/usr/bin/env python3
"""Sliding puzzle solver.

Usage::

    python main.py solve 1,2,3,4,5,6,7,0,8
    python main.py hint 5,1,2,4,0,3,7,8,6 --type direct
    python main.py scramble -s 4 --preset hard
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidehint.cli.app import app  # noqa: E402

if __name__ == "__main__":
    app()
